# -*- coding: utf-8 -*-
"""
Tests for CompletionController (Next/Finish, Back and closing).
"""
import pytest


def _cancel(args):
    args.cancel = True


class TestNextFinish:

    def test_next_on_intermediate_step_moves_next(self, wizard, make_steps):
        a, b = make_steps("A", "B")
        wizard.on_loaded()
        moving = []
        finishing = []
        wizard.moving_next.connect(moving.append)
        wizard.finishing.connect(finishing.append)

        wizard.on_next_finish_activated()

        assert len(moving) == 1
        assert finishing == []
        assert wizard.current_step is b

    def test_cancelled_moving_next_stays(self, wizard, make_steps):
        a, b = make_steps("A", "B")
        wizard.on_loaded()
        wizard.moving_next.connect(_cancel)

        wizard.on_next_finish_activated()

        assert wizard.current_step is a

    def test_finish_on_last_enabled_step(self, wizard, make_steps, container):
        a, b, c = make_steps("A", "B", ("C", False))
        wizard.on_loaded()
        wizard.go_next()
        finishing = []
        moving = []
        wizard.finishing.connect(finishing.append)
        wizard.moving_next.connect(moving.append)

        wizard.on_next_finish_activated()

        assert len(finishing) == 1
        assert moving == []
        assert wizard.finish_committed is True
        assert container.close_requests == 1

    def test_cancelled_finish_keeps_wizard_open(self, wizard, make_steps, container):
        make_steps("A")
        wizard.on_loaded()
        wizard.finishing.connect(_cancel)

        wizard.on_next_finish_activated()

        assert wizard.finish_committed is False
        assert container.close_requests == 0

    def test_raising_finishing_handler_keeps_wizard_open(self, wizard, make_steps, container):
        make_steps("A")
        wizard.on_loaded()

        def explode(args):
            raise ValueError("cannot finish")

        wizard.finishing.connect(explode)

        with pytest.raises(ValueError, match="cannot finish"):
            wizard.on_next_finish_activated()

        assert wizard.finish_committed is False
        assert container.close_requests == 0

    def test_raising_moving_next_handler_stays(self, wizard, make_steps):
        a, b = make_steps("A", "B")
        wizard.on_loaded()

        def explode(args):
            raise ValueError("cannot move")

        wizard.moving_next.connect(explode)

        with pytest.raises(ValueError):
            wizard.on_next_finish_activated()

        assert wizard.current_step is a


class TestBack:

    def test_back_moves_to_previous_step(self, wizard, make_steps):
        a, b = make_steps("A", "B")
        wizard.on_loaded()
        wizard.go_next()
        moving_back = []
        wizard.moving_back.connect(moving_back.append)

        wizard.on_back_activated()

        assert len(moving_back) == 1
        assert wizard.current_step is a

    def test_cancelled_back_stays(self, wizard, make_steps):
        a, b = make_steps("A", "B")
        wizard.on_loaded()
        wizard.go_next()
        wizard.moving_back.connect(_cancel)

        wizard.on_back_activated()

        assert wizard.current_step is b


class TestClosing:

    def test_closing_without_finish_reports_cancel_once(self, wizard, make_steps):
        make_steps("A", "B")
        wizard.on_loaded()
        cancelled = []
        wizard.cancelled.connect(cancelled.append)

        wizard.on_closing()
        wizard.on_closing()

        assert len(cancelled) == 1

    def test_closing_after_finish_is_not_a_cancel(self, wizard, make_steps):
        make_steps("A")
        wizard.on_loaded()
        cancelled = []
        wizard.cancelled.connect(cancelled.append)

        wizard.on_next_finish_activated()
        wizard.on_closing()

        assert wizard.finish_committed is True
        assert cancelled == []

    def test_closing_after_cancelled_finish_is_a_cancel(self, wizard, make_steps):
        make_steps("A")
        wizard.on_loaded()
        wizard.finishing.connect(_cancel)
        cancelled = []
        wizard.cancelled.connect(cancelled.append)

        wizard.on_next_finish_activated()
        wizard.on_closing()

        assert len(cancelled) == 1
