from __future__ import annotations
import json, logging
from disc_core.types import Selection
from disc_core.engine import evaluate
from disc_core.question_bank import load_forced_choice_schema
from disc_core.descriptions import type_description
from disc_core.submission import forced_choice_fields
def ask(prompt: str, options) -> str:
    print(prompt)
    for i,opt in enumerate(options, start=1): print(f"  [{i}] {opt}")
    while True:
        v = input("Your choice (number): ").strip()
        if v.isdigit() and 1 <= int(v) <= len(options): return options[int(v)-1]
        print(f"Enter a number from 1 to {len(options)}.")
def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    schema = load_forced_choice_schema()
    print(f"DISC Assessment: {len(schema.groups)} groups")
    responses: dict[int, Selection] = {}
    for g in schema.groups:
        labels = [c.label for c in g.items]
        most = ask(f"\nGroup {g.id}: which is MOST like you?", labels)
        rest = [l for l in labels if l != most]
        least = ask(f"Group {g.id}: which is LEAST like you?", rest)
        responses[g.id] = Selection(most=most, least=least)
    ev = evaluate(responses, schema)
    desc = type_description(ev.classification.primary_label)
    print(f"\nPrimary: {ev.classification.primary_label}  ({desc['title']})")
    print(f"Order:   {ev.classification.type_order}")
    print("Fields:  " + json.dumps(forced_choice_fields(ev)))
if __name__ == "__main__": main()
