"""
In-Memory Agreement Provider.

Serves a fixed, fully materialized set of agreements. With no arguments it
serves the seven sample agreements used throughout development and tests.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Iterable, List, Optional

from agreement_query.domain.entities import Agreement


def _agreement(
    id: int,
    name: str,
    description: str,
    start: str,
    end: str,
    status: str,
    created: str,
) -> Agreement:
    return Agreement(
        id=id,
        name=name,
        description=description,
        start_date=date.fromisoformat(start),
        end_date=date.fromisoformat(end),
        status=status,
        created_at=datetime.fromisoformat(created),
    )


SAMPLE_AGREEMENTS: List[Agreement] = [
    _agreement(
        1,
        "Convenio Académico Internacional 2025",
        "Intercambio estudiantil con instituciones europeas",
        "2025-01-15", "2025-12-15", "Active", "2025-01-02T09:00:00",
    ),
    _agreement(
        2,
        "Convenio Tecnológico Microsoft",
        "Capacitación en tecnologías cloud para estudiantes",
        "2025-03-01", "2025-11-30", "Active", "2025-01-03T09:00:00",
    ),
    _agreement(
        3,
        "Convenio Investigación Borrador",
        "Proyecto de investigación en biotecnología pendiente",
        "2025-06-01", "2026-05-31", "Draft", "2025-01-04T09:00:00",
    ),
    _agreement(
        4,
        "Convenio Cultural Universidad Central",
        "Intercambio cultural y deportivo",
        "2025-08-01", "2025-12-31", "Draft", "2025-01-05T09:00:00",
    ),
    _agreement(
        5,
        "Convenio Comercial 2024 Finalizado",
        "Proyecto comercial ya completado del año pasado",
        "2024-01-01", "2024-12-31", "Finalized", "2025-01-06T09:00:00",
    ),
    _agreement(
        6,
        "Convenio Prácticas Profesionales SENA",
        "Programa de prácticas para estudiantes técnicos",
        "2025-02-01", "2025-12-01", "Active", "2025-01-07T09:00:00",
    ),
    _agreement(
        7,
        "Convenio Histórico Archivado",
        "Convenio archivado de años anteriores",
        "2023-01-01", "2023-12-31", "Archived", "2025-01-08T09:00:00",
    ),
]


class InMemoryAgreementProvider:
    """Record source backed by a list held in memory."""

    def __init__(self, agreements: Optional[Iterable[Agreement]] = None) -> None:
        """
        Initialize provider.

        Args:
            agreements: Records to serve (defaults to SAMPLE_AGREEMENTS)
        """
        self._agreements = list(SAMPLE_AGREEMENTS if agreements is None else agreements)

    def get_agreements(self) -> List[Agreement]:
        """Return a fresh copy of the full record set."""
        return list(self._agreements)

    def count_by_status(self) -> Dict[str, int]:
        """Number of records per status."""
        counts: Dict[str, int] = {}
        for agreement in self._agreements:
            counts[agreement.status] = counts.get(agreement.status, 0) + 1
        return counts
