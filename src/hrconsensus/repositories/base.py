"""Shared helpers for store-backed repositories."""

from __future__ import annotations

import uuid
from typing import Callable

import pendulum

IdFactory = Callable[[], str]
NowProvider = Callable[[], pendulum.DateTime]


def new_id() -> str:
    return uuid.uuid4().hex


def utc_now() -> pendulum.DateTime:
    return pendulum.now("UTC")
