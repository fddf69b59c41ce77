from __future__ import annotations
import json, logging
from disc_core.engine import evaluate
from disc_core.question_bank import load_likert_schema, load_likert_scale
from disc_core.descriptions import style_description
from disc_core.submission import likert_fields
def ask(prompt: str, scale: dict[int, str]) -> int:
    print(prompt)
    print("  " + "  ".join(f"[{k}] {v}" for k, v in sorted(scale.items())))
    while True:
        v = input("Your answer (1-5): ").strip()
        if v.isdigit() and int(v) in scale: return int(v)
        print("Enter a number from 1 to 5.")
def main():
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    schema = load_likert_schema(); scale = load_likert_scale()
    print(f"DISC Assessment (Likert): {len(schema.question_ids)} statements")
    responses = {qid: ask(f"\n{qid}. {schema.statements.get(qid, '')}", scale) for qid in schema.question_ids}
    ev = evaluate(responses, schema)
    cls = ev.classification
    print(f"\nPrimary:   {style_description(cls.primary_label)['name']} ({cls.primary_label})")
    print(f"Secondary: {style_description(cls.secondary)['name']} ({cls.secondary.value})")
    print(f"Order:     {cls.type_order}")
    print("Fields:    " + json.dumps(likert_fields(ev)))
if __name__ == "__main__": main()
