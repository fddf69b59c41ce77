from __future__ import annotations
import logging, sys
from disc_core.question_bank import audit_forced_choice, audit_likert, load_raw

BANKS = {
    "forced_choice": ("disc_items.json", audit_forced_choice),
    "likert": ("likert_items.json", audit_likert),
}

def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    failed = 0
    for mode, (fname, audit) in BANKS.items():
        raw = load_raw(fname)
        problems = audit(raw)
        size = len(raw) if isinstance(raw, list) else len(raw.get("statements") or {})
        print(f"{mode}: {fname} ({size} entries)")
        if problems:
            failed += len(problems)
            for p in problems:
                print(f"  ✗ {p}")
        else:
            print("  ✓ OK")
    if failed:
        logging.error("%d problem(s) found", failed)
    return 1 if failed else 0

if __name__ == "__main__":
    sys.exit(main())
