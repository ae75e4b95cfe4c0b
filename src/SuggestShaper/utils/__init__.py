"""Shared helpers: package logger setup."""

from __future__ import annotations
