"""
Shared source-record factories.
"""
import pytest


def make_person(name="Anna Schmidt",
                status="active",
                aggregated_status="active",
                salary="800",
                last_12="0.85",
                ytd="0.8",
                last_three=None,
                series_key="potentialEarningsByMonth",
                series=None):
    """Build a person sub-record in the source shape."""
    person = {
        "name": name,
        "status": status,
        "statusAggregation": {
            "status": aggregated_status,
            "monthlySalary": salary,
        },
        "workforceUtilisation": {
            "utilisationRateLastTwelveMonths": last_12,
            "utilisationRateYearToDate": ytd,
            "lastThreeMonthsIndividually": last_three if last_three is not None else [
                {"utilisationRate": "0.9"},
                {"utilisationRate": "0.8"},
                {"utilisationRate": "0.7"},
            ],
        },
    }
    if series is not None:
        person[series_key] = series
    return person


@pytest.fixture
def person_factory():
    return make_person


@pytest.fixture
def source_records():
    """Mixed dataset: two active people, one inactive, one empty record."""
    return [
        {"employees": make_person(
            name="Anna Schmidt",
            series=[
                {"month": "2024-05", "costs": "1000"},
                {"month": "2024-06", "costs": "1200"},
            ],
        )},
        {"externals": make_person(
            name="Marco Rossi",
            series_key="costsByMonth",
            series=[
                {"month": "2024-04", "costs": "500"},
                {"month": "2024-06", "costs": "700"},
            ],
        )},
        {"employees": make_person(
            name="Lena Vogel",
            status="inactive",
            aggregated_status="inactive",
        )},
        {"id": "no-person"},
    ]
