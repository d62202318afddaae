from typing import List
from unittest.mock import MagicMock

from ...plugins.module_utils.api_client import ApiClient
from ...plugins.module_utils.deployment import Deployment


class FakeClock:
    """Stands in for time.sleep so waits run instantly and can be measured."""

    def __init__(self) -> None:
        self.elapsed = 0
        self.calls: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)
        self.elapsed += seconds


def make_deployment(id: str = 'd3ad', name: str = 'my-site', commit_ref: str = 'abc123',
                    state: str = 'building', error_message: str = None,
                    deploy_ssl_url: str = 'https://branch--my-site.netlify.app') -> Deployment:
    return Deployment.from_dict({
        'id': id,
        'name': name,
        'commit_ref': commit_ref,
        'state': state,
        'error_message': error_message,
        'deploy_ssl_url': deploy_ssl_url,
    })


def get_mock_api_client(deploys: list = None, deploy: list = None) -> ApiClient:
    client = ApiClient('secret-token')
    client.deploys = MagicMock()
    if deploys is not None:
        client.deploys.side_effect = deploys
    client.deploy = MagicMock()
    if deploy is not None:
        client.deploy.side_effect = deploy
    return client
