#!/usr/bin/env python3
"""
Complete Pipeline Demo: .smt2 → LogicRecord → Catalog → Enum

Shows the full workflow:
1. Load the bundled QF_FF logic definition
2. Summarize it
3. Re-render it in canonical form and export it as YAML
4. Generate a Python Enum of every bundled logic
"""

from smtlogic.backends import generate_logic_enum
from smtlogic.describe import describe
from smtlogic.examples import builtin_catalog, load_builtin
from smtlogic.serialization import record_to_yaml, serialize


def main():
    print("=" * 80)
    print("PIPELINE DEMO: .smt2 → LogicRecord → Catalog → Enum")
    print("=" * 80)

    print("\n1. LOADING QF_FF...")
    record = load_builtin("QF_FF")
    print(f"   ✓ Loaded logic: {record.name}")
    print(f"   ✓ Theories: {', '.join(record.theories)}")
    print(f"   ✓ Written by: {record.author}")

    print("\n2. SUMMARY:")
    print("-" * 80)
    print(describe(record))

    print("\n3. CANONICAL FORM:")
    print("-" * 80)
    print(serialize(record))
    print("YAML:")
    print(record_to_yaml(record))

    print("4. GENERATED ENUM:")
    print("-" * 80)
    print(generate_logic_enum(builtin_catalog()))


if __name__ == "__main__":
    main()
