"""
Pipeline Package - Orchestration.

Components:
    - QueryPipeline: Runs validate -> filter -> sort -> paginate

The pipeline is responsible for:
    - Validating queries before any stage runs
    - Executing filter stages in sequence
    - Ordering and slicing the matches
    - Collecting metrics and audit trail

Design Principles:
    - All dependencies injected via constructor
    - Stateless between runs
"""

from agreement_query.pipeline.query_pipeline import QueryPipeline

__all__ = ["QueryPipeline"]
