# -*- coding: utf-8 -*-
"""
Tests for WizardStep.
"""
import pytest

from stepwizard.framework import WizardStep


def test_defaults():
    step = WizardStep("Welcome")

    assert step.title == "Welcome"
    assert step.enabled is True
    assert step.visible is True
    assert step.back_button_text == ""
    assert step.next_button_text == ""
    assert step.help_text == ""


def test_enabled_changed_only_on_change():
    step = WizardStep("A")
    emitted = []
    step.enabled_changed.connect(emitted.append)

    step.enabled = True
    step.enabled = False
    step.enabled = False
    step.enabled = True

    assert emitted == [False, True]


def test_title_change_emits_old_and_new():
    step = WizardStep("Old")
    changed = []
    step.title_changed.connect(changed.append)

    step.title = "New"

    assert step.title == "New"
    assert len(changed) == 1
    assert changed[0].old_title == "Old"
    assert changed[0].new_title == "New"


def test_title_change_can_be_cancelled():
    step = WizardStep("Old")
    changed = []

    def veto(args):
        args.cancel = True

    step.title_changing.connect(veto)
    step.title_changed.connect(changed.append)

    step.title = "New"

    assert step.title == "Old"
    assert changed == []


def test_raising_title_changing_handler_keeps_old_title():
    step = WizardStep("Old")
    changed = []

    def explode(args):
        raise ValueError("bad title")

    step.title_changing.connect(explode)
    step.title_changed.connect(changed.append)

    with pytest.raises(ValueError, match="bad title"):
        step.title = "New"

    assert step.title == "Old"
    assert changed == []


def test_visible_and_help_text_signals():
    step = WizardStep("A")
    visibility = []
    help_texts = []
    step.visible_changed.connect(visibility.append)
    step.help_text_changed.connect(help_texts.append)

    step.visible = False
    step.visible = False
    step.help_text = "Some help"

    assert visibility == [False]
    assert help_texts == ["Some help"]
