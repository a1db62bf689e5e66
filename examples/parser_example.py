"""
Example usage of the province map parsers

This demonstrates how to:
1. Extract the provinces of a state file
2. Walk any other key path through the same file
3. Read the province definition table
4. Match state provinces to their map colors
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from province_map import (
    load_province_definitions, load_state_definition, resolve_key_path,
)

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), 'game_samples')


# Example 1: Parse a state file
print("=" * 60)
print("Example 1: Parsing a state file")
print("=" * 60)

state_path = os.path.join(SAMPLES_DIR, '5-Migus Magus.txt')
state = load_state_definition(state_path)

print(f"\nState ID: {state.id}")
print(f"Provinces: {state.provinces}")


# Example 2: Resolve another key path
print("\n" + "=" * 60)
print("Example 2: Resolving state -> history -> owner")
print("=" * 60)

with open(state_path, 'r', encoding='utf-8-sig') as f:
    text = f.read()

print(f"\nOwner: {resolve_key_path(text, ('state', 'history', 'owner'))}")
print(f"Buildings block: {resolve_key_path(text, ('state', 'history', 'buildings'))!r}")


# Example 3: Province colors
print("\n" + "=" * 60)
print("Example 3: Province colors from the definition table")
print("=" * 60)

definitions = load_province_definitions(os.path.join(SAMPLES_DIR, 'definition.csv'))
color_of = {province_id: color for color, province_id in definitions.items()}

for province_id in state.provinces:
    color = color_of.get(province_id)
    print(f"  {province_id:>6}: {color if color else 'no definition'}")
