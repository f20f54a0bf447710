"""User domain model."""
from __future__ import annotations
from dataclasses import dataclass


@dataclass
class User:
    username: str
    password_hash: str
    created_at: str = ""
