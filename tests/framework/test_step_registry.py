# -*- coding: utf-8 -*-
"""
Tests for StepRegistry.
"""
import pytest

from stepwizard.framework import DuplicateStepError, StepRegistry, WizardError, WizardStep


@pytest.fixture
def registry():
    return StepRegistry()


def test_find_returns_insertion_position(registry):
    steps = [WizardStep("A"), WizardStep("B"), WizardStep("C")]
    for step in steps:
        registry.append(step)

    for index, step in enumerate(steps):
        assert registry.find(step) == index


def test_find_unregistered_step(registry):
    registry.append(WizardStep("A"))

    assert registry.find(WizardStep("A")) is None
    assert registry.find(None) is None


def test_steps_are_compared_by_identity(registry):
    first = WizardStep("Same")
    second = WizardStep("Same")
    registry.append(first)
    registry.append(second)

    assert len(registry) == 2
    assert registry.find(second) == 1


def test_duplicate_step_is_rejected(registry):
    step = WizardStep("A")
    registry.append(step)

    with pytest.raises(DuplicateStepError) as excinfo:
        registry.append(step)

    assert isinstance(excinfo.value, WizardError)
    assert excinfo.value.step is step
    assert len(registry) == 1


def test_first_and_last_enabled_skip_disabled(registry):
    a = WizardStep("A", enabled=False)
    b = WizardStep("B")
    c = WizardStep("C")
    d = WizardStep("D", enabled=False)
    for step in (a, b, c, d):
        registry.append(step)

    assert registry.first_enabled() is b
    assert registry.last_enabled() is c


def test_no_enabled_steps(registry):
    registry.append(WizardStep("A", enabled=False))

    assert registry.first_enabled() is None
    assert registry.last_enabled() is None


def test_empty_registry(registry):
    assert len(registry) == 0
    assert list(registry) == []
    assert registry.first_enabled() is None


def test_iteration_follows_insertion_order(registry):
    steps = [WizardStep(title) for title in "ABC"]
    for step in steps:
        registry.append(step)

    assert list(registry) == steps
    assert registry[1] is steps[1]
    assert steps[2] in registry
