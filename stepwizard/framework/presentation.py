# -*- coding: utf-8 -*-
"""
Presentation Synchronizer - Derives button and title state from the current step.

The derived state is a pure function of the registry and the current step:
- title: "Wizard Title - Step Title"
- back button: label (override or "Back"), hidden on the first enabled step
- next/finish button: "Finish" on the last enabled step, "Next" otherwise,
  unless the step overrides the label
"""

from dataclasses import dataclass
from typing import Optional

from .container import WizardContainer
from .step_registry import StepRegistry
from .wizard_step import WizardStep
from stepwizard.utils.i18n import I18n
from stepwizard.utils.logger import get_logger

logger = get_logger(__name__)

TITLE_SEPARATOR = " - "


@dataclass(frozen=True)
class PresentationState:
    """Values pushed to the container after a transition."""
    title: str
    back_label: str
    back_visible: bool
    next_label: str
    is_last: bool


def compose_title(wizard_title: str, registry: StepRegistry, current: Optional[WizardStep]) -> str:
    """Build the composite title shown by the container."""
    if len(registry) > 0 and current is not None:
        return f"{wizard_title}{TITLE_SEPARATOR}{current.title}"
    return wizard_title


def compute_presentation(
    wizard_title: str,
    registry: StepRegistry,
    current: Optional[WizardStep],
    i18n: I18n
) -> Optional[PresentationState]:
    """
    Compute the presentation for the current step.

    Returns:
        PresentationState, or None when there is no current step
    """
    if current is None:
        return None

    back_label = current.back_button_text or i18n.t("wizard.back")
    # Compared against the first *enabled* step, not the first registered one
    back_visible = current is not registry.first_enabled()

    is_last = current is registry.last_enabled()
    if is_last:
        next_label = current.next_button_text or i18n.t("wizard.finish")
    else:
        next_label = current.next_button_text or i18n.t("wizard.next")

    return PresentationState(
        title=compose_title(wizard_title, registry, current),
        back_label=back_label,
        back_visible=back_visible,
        next_label=next_label,
        is_last=is_last
    )


class PresentationSynchronizer:
    """Pushes the derived presentation to a container."""

    def __init__(self, registry: StepRegistry, container: WizardContainer,
                 i18n: I18n, wizard_title: str = ""):
        self.registry = registry
        self.container = container
        self.i18n = i18n
        self.wizard_title = wizard_title

    def synchronize(self, current: Optional[WizardStep]) -> Optional[PresentationState]:
        """
        Recompute and push title, button labels and button visibility.

        Does nothing when there is no current step.
        """
        state = compute_presentation(self.wizard_title, self.registry, current, self.i18n)
        if state is None:
            return None

        logger.debug(
            f"Presentation: title={state.title!r}, back={state.back_label!r} "
            f"(visible={state.back_visible}), next={state.next_label!r}"
        )

        self.container.set_title(state.title)

        back = self.container.back_button
        back.label = state.back_label
        back.visible = state.back_visible

        self.container.next_finish_button.label = state.next_label

        self.container.relayout()
        self.container.redraw()
        return state
