"""Pydantic schemas for API response models."""

from .exams import *
