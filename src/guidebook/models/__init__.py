"""Guidebook data models."""

from .guide import GUIDE_ID_PATTERN, Guide

__all__ = ["GUIDE_ID_PATTERN", "Guide"]
