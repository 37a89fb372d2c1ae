# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-07
# Updated: 2026-10-19
# Description: dependencies.py
# -----------------------------------------------------------------------------
from functools import lru_cache

from api.AppContainer import AppContainer
from services.HealthService import HealthService
from services.ListChatService import ListChatService


@lru_cache
def get_container() -> AppContainer:
    # built on first use so the app imports without upstream credentials
    return AppContainer()


def get_chat_service() -> ListChatService:
    # use the singleton service from the container
    return get_container().chat_service


def get_health_service() -> HealthService:
    # use the singleton service from the container
    return get_container().health_service
