from __future__ import annotations

from fastapi import Depends

from morizo_web.config import Settings
from morizo_web.services.morizo_client import MorizoAIClient


def get_settings() -> Settings:
    return Settings()

def get_morizo_client(settings: Settings = Depends(get_settings)) -> MorizoAIClient:
    return MorizoAIClient(settings)
