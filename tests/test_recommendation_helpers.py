from __future__ import annotations

from streamcompare.algorithms.bundle_finder import find_bundles
from streamcompare.algorithms.service_scorer import PreferenceWeights, score_and_rank
from streamcompare.interfaces.catalog_store import Channel
from streamcompare.utils.recommendation_helpers import (
    coverage_percent,
    explain_bundle,
    explain_service,
    format_price,
    get_channel_names,
    get_missing_channels,
    has_full_coverage,
)

CHANNELS = [
    Channel(id=4, name="Fox News", category="News", popularity=95),
    Channel(id=1, name="ESPN", category="Sports", popularity=90),
    Channel(id=2, name="CNN", category="News", popularity=80),
    Channel(id=3, name="HGTV", category="Lifestyle", popularity=70),
]


def test_format_price() -> None:
    assert format_price(20) == "$20.00"
    assert format_price(12.345) == "$12.35"


def test_coverage_percent_rounds_half_up() -> None:
    assert coverage_percent(0.125) == 13
    assert coverage_percent(0.75) == 75
    assert coverage_percent(2 / 3) == 67


def test_missing_channels_follow_catalog_order(make_catalog) -> None:
    services, mappings = make_catalog([(1, 10.0, {1, 2, 3})])
    scored = score_and_rank(services, mappings, {1, 2, 3, 4}, PreferenceWeights())["recommendations"][0]

    assert get_missing_channels(scored, CHANNELS, {1, 2, 3, 4}) == ["Fox News"]
    assert get_missing_channels(scored, CHANNELS, {1, 2}) == []


def test_full_coverage_flag(make_catalog) -> None:
    services, mappings = make_catalog([(1, 10.0, {1, 2}), (2, 5.0, {1})])

    full = score_and_rank(services, mappings, {1, 2}, PreferenceWeights(price=1, coverage=10, features=1))
    partial = score_and_rank(services, mappings, {1, 2, 3}, PreferenceWeights())

    assert has_full_coverage(full["recommendations"], {1, 2}) is True
    assert has_full_coverage(partial["recommendations"], {1, 2, 3}) is False
    assert has_full_coverage([], {1}) is False


def test_channel_names_sorted_with_fallback() -> None:
    channel_map = {c.id: c for c in CHANNELS}

    assert get_channel_names([3, 1, 99], channel_map) == ["Channel 99", "ESPN", "HGTV"]


def test_explanations(make_catalog) -> None:
    services, mappings = make_catalog([(1, 10.0, {1, 2}), (2, 10.0, {3, 4})], max_streams=4)
    services[0].features = ["Cloud DVR"]
    selected = {1, 2, 3, 4}
    ranked = score_and_rank(services, mappings, selected, PreferenceWeights())["ranked"]

    assert explain_service(ranked[0], 4) == (
        "Includes 2 of your 4 selected channels. Ad-free, 4 simultaneous streams, Cloud DVR"
    )

    bundle = find_bundles(ranked, selected)[0]
    assert explain_bundle(bundle, 4) == (
        "Covers 100% of your selected channels (4 of 4). Total monthly cost of $20.00 for 2 services"
    )


def test_full_coverage_explanation(make_catalog) -> None:
    services, mappings = make_catalog([(1, 30.0, {1, 2})], has_ads=True)
    scored = score_and_rank(services, mappings, {1, 2}, PreferenceWeights())["recommendations"][0]

    assert explain_service(scored, 2) == (
        "Includes 2 of your 2 selected channels (100% coverage). 2 simultaneous streams"
    )
