import unittest
from unittest.mock import MagicMock, patch

import sys
sys.modules['ansible.utils.display'] = unittest.mock.Mock()

from ....common import FakeClock, make_deployment
from .....plugins.module_utils import waiters
from .....plugins.module_utils.errors import NotFound, WaitTimeout
from .....plugins.module_utils.waiters import (
  PollSession, wait_for_deploy_creation, wait_for_readiness
)


class PollSessionTester(unittest.TestCase):

    def test_tick_accumulates_elapsed(self):
        clock = FakeClock()
        session = PollSession(15, 30, clock)

        session.tick()
        assert session.elapsed == 15
        assert not session.expired

        session.tick()
        assert session.elapsed == 30
        assert session.expired
        assert clock.calls == [15, 15]

    def test_settled_session_does_not_tick(self):
        clock = FakeClock()
        with PollSession(15, 30, clock) as session:
            session.tick()

        assert session.settled
        with self.assertRaises(RuntimeError):
            session.tick()
        assert clock.calls == [15]


class DeployCreationTester(unittest.TestCase):

    def test_times_out_when_commit_never_appears(self):
        clock = FakeClock()
        fetch = MagicMock(return_value=[make_deployment(commit_ref='fff000')])

        with self.assertRaises(WaitTimeout) as e:
            wait_for_deploy_creation(fetch, 'abc123', 300, sleep=clock)

        assert e.exception.message == "Timeout reached: Deployment was not created within 300 seconds."
        assert e.exception.budget == 300
        assert clock.elapsed == 300
        # The 20th tick hits the budget before fetching.
        assert fetch.call_count == 19

    def test_times_out_before_first_fetch_with_small_budget(self):
        fetch = MagicMock()

        with self.assertRaises(WaitTimeout):
            wait_for_deploy_creation(fetch, 'abc123', 10, sleep=FakeClock())

        fetch.assert_not_called()

    def test_resolves_with_matching_deployment(self):
        clock = FakeClock()
        match = make_deployment(id='match', commit_ref='abc123')
        fetch = MagicMock(side_effect=[
            [make_deployment(id='old', commit_ref='fff000')],
            [make_deployment(id='old', commit_ref='fff000'), match],
            [match],
        ])

        deployment = wait_for_deploy_creation(fetch, 'abc123', 300, sleep=clock)

        assert deployment is match
        assert fetch.call_count == 2
        assert clock.elapsed == 30

    def test_empty_listing_keeps_polling(self):
        match = make_deployment(commit_ref='abc123')
        fetch = MagicMock(side_effect=[[], [match]])

        deployment = wait_for_deploy_creation(fetch, 'abc123', 300, sleep=FakeClock())

        assert deployment is match

    def test_missing_listing_is_not_found(self):
        fetch = MagicMock(return_value=None)

        with self.assertRaises(NotFound) as e:
            wait_for_deploy_creation(fetch, 'abc123', 300, sleep=FakeClock())

        assert e.exception.message == "Failed to get deployments for site"
        assert fetch.call_count == 1


class ReadinessTester(unittest.TestCase):

    def test_resolves_on_ready_states(self):
        for state in ['ready', 'current', 'error']:
            clock = FakeClock()
            fetch = MagicMock(side_effect=[
                make_deployment(state='building'),
                make_deployment(state=state),
            ])

            assert wait_for_readiness(fetch, 900, sleep=clock) is None
            assert fetch.call_count == 2
            assert clock.elapsed == 60

    def test_times_out_with_last_state(self):
        fetch = MagicMock(return_value=make_deployment(state='processing'))

        with self.assertRaises(WaitTimeout) as e:
            wait_for_readiness(fetch, 120, sleep=FakeClock())

        assert e.exception.message == (
            "Timeout reached: Deployment was not ready within 120 seconds. "
            "Last known deployment state: processing.")
        assert e.exception.last_state == 'processing'
        assert fetch.call_count == 3

    def test_times_out_without_observed_state(self):
        fetch = MagicMock()

        with self.assertRaises(WaitTimeout) as e:
            wait_for_readiness(fetch, 30, sleep=FakeClock())

        assert e.exception.message.endswith("Last known deployment state: undefined.")
        fetch.assert_not_called()


class ProgressLogTester(unittest.TestCase):

    def setUp(self):
        self.display = patch.object(waiters, 'display').start()
        self.addCleanup(patch.stopall)

    def test_creation_logs_each_miss(self):
        match = make_deployment(commit_ref='abc123')
        fetch = MagicMock(side_effect=[[], [make_deployment(commit_ref='fff000')], [match]])

        wait_for_deploy_creation(fetch, 'abc123', 300, sleep=FakeClock())

        assert self.display.info.call_count == 2
        self.display.info.assert_called_with("Not yet created, waiting 15 more seconds...")

    def test_readiness_logs_each_miss(self):
        fetch = MagicMock(side_effect=[
            make_deployment(state='building'),
            make_deployment(state='processing'),
            make_deployment(state='building'),
            make_deployment(state='ready'),
        ])

        wait_for_readiness(fetch, 900, sleep=FakeClock())

        assert self.display.info.call_count == 3
        self.display.info.assert_called_with("Not yet ready, waiting 30 more seconds...")

    def test_no_log_on_first_hit(self):
        fetch = MagicMock(return_value=make_deployment(state='current'))

        wait_for_readiness(fetch, 900, sleep=FakeClock())

        self.display.info.assert_not_called()
