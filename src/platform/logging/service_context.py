"""
Service context extraction for logging.

Identifies the running process so interleaved logs from several workers can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'lodging-service')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    hostname = os.getenv('HOSTNAME', '')

    # Containers expose a short hostname; fall back to PID for local development
    worker_id = hostname[:12] if hostname else str(os.getpid())

    return f'{service_name}@{deploy_env}:{worker_id}'
