"""
Tests for reading terminal input in the questionnaire walkthrough
"""

import pytest

from app.services.catalog import DEFAULT_CATALOG
from questionnaire_cli import read_answer


class TestReadAnswer:

    def test_choices_are_numbered_from_one(self):
        q = DEFAULT_CATALOG.get("selfHarmThoughts")
        assert read_answer(q, "1") == "no"
        assert read_answer(q, " 2 ") == "yes"

    @pytest.mark.parametrize("raw", ["0", "-1", "-2", "3"])
    def test_out_of_range_choice_rejected(self, raw):
        q = DEFAULT_CATALOG.get("selfHarmThoughts")
        with pytest.raises(ValueError):
            read_answer(q, raw)

    def test_zero_does_not_pick_last_choice(self):
        q = DEFAULT_CATALOG.get("sleep1")
        with pytest.raises(ValueError):
            read_answer(q, "0")

    def test_multi_choice_rejects_any_bad_number(self):
        q = DEFAULT_CATALOG.get("stressSources")
        assert read_answer(q, "1, 2") == [q.choices[0].value, q.choices[1].value]
        with pytest.raises(ValueError):
            read_answer(q, "1 0")

    def test_numeric_outside_declared_range_rejected(self):
        q = DEFAULT_CATALOG.get("currentMood")
        assert read_answer(q, "4") == 4.0
        with pytest.raises(ValueError):
            read_answer(q, "11")
        with pytest.raises(ValueError):
            read_answer(q, "nan")

    def test_blank_is_no_answer(self):
        assert read_answer(DEFAULT_CATALOG.get("notes"), "   ") is None
