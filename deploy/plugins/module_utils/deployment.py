import re

from typing import Optional

READY_STATES = ('ready', 'current', 'error')

NO_CONTENT_CHANGE = re.compile(r'canceled build due to no content change', re.IGNORECASE)


class Deployment:
    """A snapshot of a Netlify deploy record, as returned by the API.

    Only the fields needed to follow a deploy are lifted; the full payload
    stays available in `raw`.
    """

    id: str
    name: str
    commit_ref: Optional[str]
    state: Optional[str]
    error_message: Optional[str]
    deploy_ssl_url: Optional[str]

    def __init__(self, id: str, name: str, commit_ref: str = None,
                 state: str = None, error_message: str = None,
                 deploy_ssl_url: str = None, raw: dict = None) -> None:
        self.id = id
        self.name = name
        self.commit_ref = commit_ref
        self.state = state
        self.error_message = error_message
        self.deploy_ssl_url = deploy_ssl_url
        self.raw = raw if raw is not None else {}

    @classmethod
    def from_dict(cls, data: dict) -> 'Deployment':
        return cls(
            data.get('id'),
            data.get('name'),
            commit_ref=data.get('commit_ref'),
            state=data.get('state'),
            error_message=data.get('error_message'),
            deploy_ssl_url=data.get('deploy_ssl_url'),
            raw=data,
        )

    @property
    def deploy_url(self) -> str:
        return f"https://{self.id}--{self.name}.netlify.app"

    @property
    def is_ready(self) -> bool:
        return self.state in READY_STATES

    @property
    def is_error(self) -> bool:
        return self.state == 'error'

    def is_no_content_change(self) -> bool:
        return bool(self.error_message) and NO_CONTENT_CHANGE.search(self.error_message) is not None

    def __repr__(self) -> str:
        return f"Deployment(id={self.id!r}, name={self.name!r}, commit_ref={self.commit_ref!r}, state={self.state!r})"
