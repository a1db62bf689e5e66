"""
Tests against the real-format samples in examples/game_samples/.

The sample state file carries comments, a commented-out province, quoted
names and nested history blocks; the definition table carries the usual
trailing terrain columns.
"""
import os

from province_map import (
    load_province_definitions, load_state_definition, load_state_provinces,
    resolve_key_path,
)

SAMPLES_DIR = os.path.join(
    os.path.dirname(__file__), '..', 'examples', 'game_samples'
)
STATE_SAMPLE = os.path.join(SAMPLES_DIR, '5-Migus Magus.txt')
DEFINITION_SAMPLE = os.path.join(SAMPLES_DIR, 'definition.csv')


class TestStateSample:

    def test_provinces(self):
        assert load_state_provinces(STATE_SAMPLE) == [1207, 3294, 3312, 6410, 9317, 11402]

    def test_commented_province_skipped(self):
        assert 9318 not in load_state_provinces(STATE_SAMPLE)

    def test_state_id(self):
        assert load_state_definition(STATE_SAMPLE).id == 5

    def test_history_owner(self):
        with open(STATE_SAMPLE, 'r', encoding='utf-8-sig') as f:
            text = f.read()
        assert resolve_key_path(text, ('state', 'history', 'owner')) == 'MGS'


class TestDefinitionSample:

    def test_every_state_province_has_a_color(self):
        definitions = load_province_definitions(DEFINITION_SAMPLE)
        known = set(definitions.values())
        assert set(load_state_provinces(STATE_SAMPLE)) <= known

    def test_color(self):
        definitions = load_province_definitions(DEFINITION_SAMPLE)
        assert definitions[(12, 40, 200)] == 1207
