#!/usr/bin/env python3
"""
Diagnostics Package
End-of-run maintenance verdicts
"""
from .evaluator import (
    DiagnosticStatus,
    Diagnostic,
    DiagnosticEvaluator,
    evaluate_diagnostic,
    DIAGNOSTIC_EVALUATOR
)

__all__ = [
    'DiagnosticStatus',
    'Diagnostic',
    'DiagnosticEvaluator',
    'evaluate_diagnostic',
    'DIAGNOSTIC_EVALUATOR'
]
