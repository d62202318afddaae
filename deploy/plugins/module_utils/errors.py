from ansible.errors import AnsibleError


class WaitError(AnsibleError):
    """Base class for the errors that end a wait for a deployment."""


class ConfigurationMissing(WaitError):
    """A required credential or setting was not provided."""


class NotFound(WaitError):
    """The requested resource did not come back from the API or the site."""


class WaitTimeout(WaitError):
    """
    Raised when a waiter used up its time budget.

    Attributes:
        budget -- the budget in seconds
        last_state -- the last deployment state observed, if any
    """

    def __init__(self, message: str, budget: int, last_state: str = None):
        self.budget = budget
        self.last_state = last_state
        super().__init__(message)


class DeploymentError(WaitError):
    """The deployment finished in an error state that can't be skipped."""


class ApiError(WaitError):
    """The Netlify API could not be reached or answered with an error."""
