# disc_core/descriptions.py
from __future__ import annotations
from typing import Dict
from .types import Dimension

TYPE_DESCRIPTIONS: Dict[str, Dict[str, object]] = {
    "High D": {"title": "Dominance (D)",
               "traits": ["Results-focused", "Direct communicator", "Decisive", "Competitive", "Independent"],
               "works_with": ["Provide clear outcomes and goals", "Allow autonomy and decision-making authority",
                              "Be direct and concise in communication", "Focus on results rather than process"],
               "best_roles": ["Leadership", "Project Management", "Sales", "Entrepreneurship"]},
    "High I": {"title": "Influence (I)",
               "traits": ["Enthusiastic", "Optimistic", "Persuasive", "Sociable", "Trusting"],
               "works_with": ["Provide opportunities for collaboration", "Recognize achievements publicly",
                              "Allow time for discussion and brainstorming", "Create a positive, energetic environment"],
               "best_roles": ["Sales", "Marketing", "Public Relations", "Customer Relations"]},
    "High S": {"title": "Steadiness (S)",
               "traits": ["Patient", "Loyal", "Supportive", "Calm", "Consistent"],
               "works_with": ["Provide clear processes and expectations", "Allow time to adapt to change",
                              "Create stable, harmonious environment", "Show appreciation for their reliability"],
               "best_roles": ["Customer Service", "Human Resources", "Healthcare", "Administration"]},
    "High C": {"title": "Conscientiousness (C)",
               "traits": ["Analytical", "Precise", "Systematic", "Careful", "Quality-focused"],
               "works_with": ["Provide detailed information and data", "Allow time for thorough analysis",
                              "Respect need for accuracy and quality", "Minimize surprises and sudden changes"],
               "best_roles": ["Data Analysis", "Engineering", "Accounting", "Research", "Quality Assurance"]},
    "DI": {"title": "Dominance-Influence (DI)",
           "traits": ["Ambitious", "Persuasive", "Bold", "Outgoing", "Results-driven"],
           "works_with": ["Provide challenging goals with social interaction", "Allow independence while encouraging teamwork",
                          "Focus on both outcomes and people", "Offer variety and new opportunities"],
           "best_roles": ["Executive Leadership", "Business Development", "Consulting"]},
    "DC": {"title": "Dominance-Conscientiousness (DC)",
           "traits": ["Determined", "Systematic", "Independent", "Quality-focused", "Strategic"],
           "works_with": ["Provide clear goals with high standards", "Allow autonomy to execute plans",
                          "Focus on results and accuracy", "Minimize unnecessary interaction"],
           "best_roles": ["Project Management", "Technical Leadership", "Strategy"]},
    "IS": {"title": "Influence-Steadiness (IS)",
           "traits": ["Friendly", "Patient", "Cooperative", "Supportive", "Optimistic"],
           "works_with": ["Create collaborative environment", "Provide recognition and stability",
                          "Allow time for relationship building", "Focus on team harmony"],
           "best_roles": ["Customer Service", "Team Coordination", "Community Management"]},
    "SC": {"title": "Steadiness-Conscientiousness (SC)",
           "traits": ["Reliable", "Methodical", "Patient", "Thorough", "Consistent"],
           "works_with": ["Provide clear processes and procedures", "Allow time for careful work",
                          "Create stable, structured environment", "Appreciate attention to detail"],
           "best_roles": ["Operations", "Administration", "Compliance", "Quality Control"]},
    "Balanced": {"title": "Balanced Profile",
                 "traits": ["Adaptable", "Versatile", "Flexible", "Well-rounded", "Situational"],
                 "works_with": ["Provide varied responsibilities", "Allow flexibility in approach",
                                "Recognize adaptability", "Offer diverse challenges"],
                 "best_roles": ["General Management", "Consulting", "Multiple Roles"]},
}

STYLE_DESCRIPTIONS: Dict[Dimension, Dict[str, str]] = {
    Dimension.D: {"name": "Dominance",
                  "traits": "Direct, decisive, goal-oriented leaders who take charge and drive results.",
                  "strengths": "Strong leadership, quick decision-making, results-focused, competitive, confident.",
                  "works_with": "Provide autonomy, clear goals, and opportunities to lead. Be direct and concise.",
                  "roles": "Leadership, Project Management, Sales, Entrepreneurship"},
    Dimension.I: {"name": "Influence",
                  "traits": "Social, persuasive, enthusiastic communicators who inspire and energize others.",
                  "strengths": "Excellent communication, persuasive, optimistic, collaborative, relationship-building.",
                  "works_with": "Provide recognition, collaboration opportunities, and social interaction. Keep things positive.",
                  "roles": "Sales, Marketing, Public Relations, Customer Relations, Team Leadership"},
    Dimension.S: {"name": "Steadiness",
                  "traits": "Patient, reliable, supportive team players who value stability and harmony.",
                  "strengths": "Dependable, patient, great listeners, team-oriented, calm under pressure.",
                  "works_with": "Provide stability, clear expectations, and time to adapt to change. Show appreciation.",
                  "roles": "Customer Service, Human Resources, Healthcare, Administration, Support Roles"},
    Dimension.C: {"name": "Conscientiousness",
                  "traits": "Analytical, precise, quality-driven contributors who value accuracy and systems.",
                  "strengths": "Attention to detail, analytical thinking, systematic, quality-focused, thorough.",
                  "works_with": "Provide clear standards, time for analysis, and respect for quality. Minimize surprises.",
                  "roles": "Data Analysis, Engineering, Accounting, Research, Quality Assurance, Compliance"},
}


def type_description(primary_label: str) -> Dict[str, object]:
    # 3-letter ties and unlisted pairs have no dedicated copy
    return TYPE_DESCRIPTIONS.get(primary_label, TYPE_DESCRIPTIONS["Balanced"])


def style_description(dim: Dimension | str) -> Dict[str, str]:
    return STYLE_DESCRIPTIONS[Dimension(dim)]
