# -*- coding: utf-8 -*-
"""Wizard step services."""

from .step_validator import StepValidator, ROOT_ERROR_KEY

__all__ = ['StepValidator', 'ROOT_ERROR_KEY']
