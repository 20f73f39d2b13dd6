from datetime import date
from types import SimpleNamespace

from app.services.vaccination_report import (
    CANONICAL_VACCINES,
    build_health_records_report,
    build_vaccination_report,
    coverage_percentage,
    match_canonical_vaccines,
)

TODAY = date(2025, 9, 1)


def _children(count):
    return [
        SimpleNamespace(id=i, mother_id=1, name=f"Child {i}", dob=date(2024, 1, 1), gender="female")
        for i in range(1, count + 1)
    ]


def test_matching_is_case_insensitive_substring():
    assert match_canonical_vaccines("bcg at birth") == ["BCG"]
    assert match_canonical_vaccines("Oral POLIO dose 2") == ["Polio"]
    assert match_canonical_vaccines("Vitamin A") == []
    assert match_canonical_vaccines(None) == []


def test_one_entry_can_cover_several_vaccines():
    assert match_canonical_vaccines("DPT + Hepatitis B combo") == ["Hepatitis B", "DPT"]


def test_measles_entry_does_not_cover_mmr():
    assert match_canonical_vaccines("Measles") == ["Measles"]


def test_coverage_six_of_ten_is_sixty_percent():
    children = _children(10)
    names = {child.id: ["BCG"] for child in children[:6]}

    report = build_vaccination_report(children, names, today=TODAY)
    bcg = next(c for c in report.coverage if c.vaccine == "BCG")

    assert bcg.given == 6
    assert bcg.total_children == 10
    assert bcg.percentage == 60
    assert [c.id for c in bcg.missing] == [7, 8, 9, 10]


def test_covered_and_missing_cohorts_partition_children():
    children = _children(5)
    names = {1: ["BCG", "Polio"], 2: ["polio booster"], 4: ["MMR"]}

    report = build_vaccination_report(children, names, today=TODAY)
    statuses = {s.child.id: s for s in report.children}

    for coverage in report.coverage:
        covered = {cid for cid, s in statuses.items() if coverage.vaccine in s.given_vaccines}
        missing = {c.id for c in coverage.missing}
        assert covered.isdisjoint(missing)
        assert covered | missing == {1, 2, 3, 4, 5}
        assert coverage.given == len(covered)


def test_totals_and_average():
    children = _children(3)
    names = {1: ["BCG", "DPT"], 2: ["BCG"]}

    report = build_vaccination_report(children, names, today=TODAY)

    assert report.total_vaccines_given == 3
    assert report.average_vaccines_per_child == 1.0
    assert report.vaccine_types_tracked == len(CANONICAL_VACCINES)


def test_zero_children_reports_zero_not_error():
    report = build_vaccination_report([], {}, today=TODAY)
    assert report.total_children == 0
    assert report.average_vaccines_per_child == 0
    assert all(c.percentage == 0 for c in report.coverage)


def test_percentage_rounds_half_up():
    assert coverage_percentage(1, 8) == 13
    assert coverage_percentage(0, 0) == 0


def test_health_records_report_splits_children():
    children = _children(3)
    dates = {1: [date(2025, 1, 1), date(2025, 3, 1)]}

    report = build_health_records_report(children, dates, today=TODAY)

    assert report.children_with_records == 1
    assert report.children_without_records == 2
    assert report.with_records[0].record_count == 2
    assert report.with_records[0].last_record_date == date(2025, 3, 1)
