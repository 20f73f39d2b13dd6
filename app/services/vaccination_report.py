"""Vaccination coverage and health-record follow-up reports.

Vaccine names are free text. A record counts toward a canonical vaccine when
the canonical name appears anywhere in it, ignoring case, so "bcg at birth"
covers BCG. One entry may cover several canonical vaccines if it names more
than one.
"""

import logging
from datetime import date
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from app.schemas.child import ChildResponse
from app.schemas.report import (
    ChildRecordSummary,
    ChildVaccinationStatus,
    HealthRecordsReportResponse,
    VaccinationReportResponse,
    VaccineCoverage,
)
from app.services.growth import round_half_up

logger = logging.getLogger(__name__)

CANONICAL_VACCINES = ("BCG", "Hepatitis B", "DPT", "Polio", "Measles", "MMR")


def match_canonical_vaccines(
    vaccine_name: Optional[str], canonical: Sequence[str] = CANONICAL_VACCINES
) -> List[str]:
    """Canonical vaccines named in a free-text entry (case-insensitive substring)."""
    if not vaccine_name:
        return []
    text = vaccine_name.casefold()
    return [vaccine for vaccine in canonical if vaccine.casefold() in text]


def covered_vaccines(
    vaccine_names: Iterable[Optional[str]], canonical: Sequence[str] = CANONICAL_VACCINES
) -> List[str]:
    """Canonical vaccines covered by any of a child's entries, in canonical order."""
    found = set()
    for name in vaccine_names:
        found.update(match_canonical_vaccines(name, canonical))
    return [vaccine for vaccine in canonical if vaccine in found]


def coverage_percentage(given: int, total: int) -> int:
    if total == 0:
        return 0
    return int(round_half_up(given / total * 100))


def average_per_child(total_given: int, total_children: int) -> float:
    if total_children == 0:
        return 0
    return round_half_up(total_given / total_children, 1)


def build_vaccination_report(
    children: Sequence,
    vaccine_names_by_child: Mapping[int, Sequence[Optional[str]]],
    *,
    canonical: Sequence[str] = CANONICAL_VACCINES,
    today: Optional[date] = None,
) -> VaccinationReportResponse:
    """Aggregate coverage for every canonical vaccine.

    Args:
        children: Child rows (anything `ChildResponse.from_child` accepts)
        vaccine_names_by_child: child id -> vaccine names of its immunizations
        canonical: Canonical vaccine names to report on
        today: Reference date for the ages shown

    Returns:
        VaccinationReportResponse; for each vaccine the covered children and
        the `missing` cohort partition the full child set.
    """
    total = len(children)
    statuses: List[ChildVaccinationStatus] = []
    covered_by_vaccine: Dict[str, int] = {vaccine: 0 for vaccine in canonical}
    missing_by_vaccine: Dict[str, List[ChildResponse]] = {vaccine: [] for vaccine in canonical}

    for child in children:
        names = vaccine_names_by_child.get(child.id, [])
        given = covered_vaccines(names, canonical)
        summary = ChildResponse.from_child(child, today)

        for vaccine in canonical:
            if vaccine in given:
                covered_by_vaccine[vaccine] += 1
            else:
                missing_by_vaccine[vaccine].append(summary)

        statuses.append(
            ChildVaccinationStatus(
                child=summary,
                given_vaccines=given,
                total_vaccines=len(given),
                immunization_count=len(names),
            )
        )

    total_given = sum(status.total_vaccines for status in statuses)
    coverage = [
        VaccineCoverage(
            vaccine=vaccine,
            given=covered_by_vaccine[vaccine],
            total_children=total,
            percentage=coverage_percentage(covered_by_vaccine[vaccine], total),
            missing=missing_by_vaccine[vaccine],
        )
        for vaccine in canonical
    ]

    logger.info(f"[REPORT] Vaccination coverage computed for {total} children")
    return VaccinationReportResponse(
        total_children=total,
        total_vaccines_given=total_given,
        average_vaccines_per_child=average_per_child(total_given, total),
        vaccine_types_tracked=len(canonical),
        coverage=coverage,
        children=statuses,
    )


def build_health_records_report(
    children: Sequence,
    record_dates_by_child: Mapping[int, Sequence[date]],
    *,
    today: Optional[date] = None,
) -> HealthRecordsReportResponse:
    """Split children into those with and without any health record."""
    with_records: List[ChildRecordSummary] = []
    without_records: List[ChildResponse] = []

    for child in children:
        dates = record_dates_by_child.get(child.id, [])
        summary = ChildResponse.from_child(child, today)
        if dates:
            with_records.append(
                ChildRecordSummary(child=summary, record_count=len(dates), last_record_date=max(dates))
            )
        else:
            without_records.append(summary)

    return HealthRecordsReportResponse(
        total_children=len(children),
        children_with_records=len(with_records),
        children_without_records=len(without_records),
        with_records=with_records,
        without_records=without_records,
    )
