"""
Service identification for log lines.

Every record carries `<service>@<env>:<instance>` so that output from several
API replicas sharing one collector can be told apart.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'flight-inventory')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when running in a pod, PID otherwise
    instance = os.getenv('HOSTNAME', '') or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance[:12]}'
