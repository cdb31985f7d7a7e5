"""Tests for label-based channel selection."""

from review_reminder.models.routing import LabelChannelMap, LabelRule
from review_reminder.routing import pick_channel

LABEL_MAP = LabelChannelMap(
    default_channel_id="C_DEFAULT",
    rules=[
        LabelRule(labels_any=["frontend", "ui"], channel_id="C_FRONT"),
        LabelRule(labels_any=["backend"], channel_id="C_BACK"),
    ],
)


def test_returns_channel_of_matching_rule():
    assert pick_channel(["backend"], LABEL_MAP) == "C_BACK"


def test_matches_any_label_in_rule():
    assert pick_channel(["ui"], LABEL_MAP) == "C_FRONT"


def test_first_matching_rule_wins():
    """When several rules match, declaration order decides."""
    assert pick_channel(["backend", "frontend"], LABEL_MAP) == "C_FRONT"


def test_default_channel_when_no_rule_matches():
    assert pick_channel(["docs"], LABEL_MAP) == "C_DEFAULT"


def test_none_when_no_default_and_no_match():
    label_map = LabelChannelMap(rules=[LabelRule(labels_any=["backend"], channel_id="C_BACK")])
    assert pick_channel(["docs"], label_map) is None


def test_empty_and_missing_labels_fall_back_to_default():
    assert pick_channel([], LABEL_MAP) == "C_DEFAULT"
    assert pick_channel(None, LABEL_MAP) == "C_DEFAULT"


def test_blank_label_names_are_ignored():
    label_map = LabelChannelMap(rules=[LabelRule(labels_any=[""], channel_id="C_BLANK")])
    assert pick_channel(["", "docs"], label_map) is None


def test_no_rules_uses_default():
    assert pick_channel(["frontend"], LabelChannelMap(default_channel_id="C0")) == "C0"
