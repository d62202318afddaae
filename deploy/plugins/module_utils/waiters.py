from __future__ import annotations

import time

from .deployment import Deployment
from .display import Display
from .errors import NotFound, WaitTimeout
from typing import Callable, List, Optional

display = Display()

CREATION_INTERVAL = 15
READINESS_INTERVAL = 30


class PollSession:
    """The state of a single wait: elapsed time, last state seen and the
    sleep used as its timer.

    A session is used as a context manager and is settled on exit, whatever
    the outcome; a settled session refuses to tick again.
    """

    def __init__(self, interval: int, budget: int,
                 sleep: Callable[[float], None] = time.sleep) -> None:
        self.interval = interval
        self.budget = budget
        self.sleep = sleep
        self.elapsed = 0
        self.last_state: Optional[str] = None
        self.settled = False

    def __enter__(self) -> PollSession:
        return self

    def __exit__(self, *args):
        self.close()

    def tick(self):
        if self.settled:
            raise RuntimeError("Poll session already settled.")
        self.sleep(self.interval)
        self.elapsed += self.interval

    @property
    def expired(self) -> bool:
        return self.elapsed >= self.budget

    def close(self):
        self.settled = True


def wait_for_deploy_creation(fetch: Callable[[], Optional[List[Deployment]]],
                             commit_sha: str, max_timeout: int,
                             sleep: Callable[[float], None] = time.sleep) -> Deployment:
    """Polls the deploy listing until a deploy for `commit_sha` shows up.

    The budget is checked before every fetch, so the loop ends even if a
    fetch never returns a match.
    """
    with PollSession(CREATION_INTERVAL, max_timeout, sleep) as session:
        while True:
            session.tick()

            if session.expired:
                raise WaitTimeout(
                    f"Timeout reached: Deployment was not created within {max_timeout} seconds.",
                    max_timeout)

            deployments = fetch()
            if deployments is None:
                raise NotFound("Failed to get deployments for site")

            for deployment in deployments:
                if deployment.commit_ref == commit_sha:
                    return deployment

            display.info(f"Not yet created, waiting {CREATION_INTERVAL} more seconds...")


def wait_for_readiness(fetch: Callable[[], Deployment], max_timeout: int,
                       sleep: Callable[[float], None] = time.sleep) -> None:
    """Polls a single deploy until it reaches one of the ready states."""
    with PollSession(READINESS_INTERVAL, max_timeout, sleep) as session:
        while True:
            session.tick()

            if session.expired:
                state = session.last_state if session.last_state is not None else 'undefined'
                raise WaitTimeout(
                    f"Timeout reached: Deployment was not ready within {max_timeout} seconds. "
                    f"Last known deployment state: {state}.",
                    max_timeout, session.last_state)

            deployment = fetch()
            session.last_state = deployment.state

            if deployment.is_ready:
                return

            display.info(f"Not yet ready, waiting {READINESS_INTERVAL} more seconds...")
