"""Mini README: Tests for the in-memory asset store.

Structure:
    * creation and validation - payload coercion, identifiers, timestamps.
    * updates and deletion - editable fields and missing identifiers.
    * lifecycle - active -> matured/closed, terminal states stay terminal.
    * portfolio totals - reduction over per-asset projections.
"""

from __future__ import annotations

from datetime import date, datetime

import pytest

from householdledger.assets import (
    AssetKind,
    AssetStatus,
    AssetStore,
    AssetTransitionError,
    summarise_portfolio,
)

FIXED_NOW = datetime(2024, 1, 1, 12, 0)


def _store() -> AssetStore:
    return AssetStore(clock=lambda: FIXED_NOW)


def _payload(**overrides) -> dict:
    payload = {
        "kind": "Deposit",
        "bank_name": "  Hana  ",
        "principal": "1000000",
        "annual_rate": 3.0,
        "maturity_date": "2025-01-01",
    }
    payload.update(overrides)
    return payload


def test_create_asset_coerces_payload_and_stamps_times() -> None:
    store = _store()

    asset = store.create_asset(_payload())

    assert asset.asset_id == "asset_0001"
    assert asset.kind is AssetKind.DEPOSIT
    assert asset.bank_name == "Hana"
    assert asset.principal == pytest.approx(1_000_000.0)
    assert asset.maturity_date == date(2025, 1, 1)
    assert asset.created_at == FIXED_NOW
    assert asset.updated_at == FIXED_NOW
    assert asset.status is AssetStatus.ACTIVE


def test_identifiers_continue_after_preloaded_assets() -> None:
    store = _store()
    first = store.create_asset(_payload())
    reloaded = AssetStore([first], clock=lambda: FIXED_NOW)

    assert reloaded.create_asset(_payload()).asset_id == "asset_0002"


@pytest.mark.parametrize(
    "overrides",
    [
        {"principal": -1},
        {"principal": "inf"},
        {"annual_rate": "1e400"},
        {"annual_rate": float("nan")},
        {"annual_rate": "abc"},
        {"kind": "bond"},
        {"maturity_date": "01/02/2025"},
        {"maturity_date": None},
        {"status": "closed"},
    ],
)
def test_create_asset_rejects_invalid_payloads(overrides) -> None:
    with pytest.raises(ValueError):
        _store().create_asset(_payload(**overrides))


def test_list_assets_orders_by_maturity() -> None:
    store = _store()
    later = store.create_asset(_payload(maturity_date="2026-05-01"))
    sooner = store.create_asset(_payload(maturity_date="2024-09-01"))

    assert [asset.asset_id for asset in store.list_assets()] == [sooner.asset_id, later.asset_id]


def test_update_asset_changes_only_given_fields() -> None:
    times = iter([FIXED_NOW, datetime(2024, 2, 1)])
    store = AssetStore(clock=lambda: next(times))
    asset = store.create_asset(_payload())

    updated = store.update_asset(asset.asset_id, {"annual_rate": "3.8", "kind": "savings"})

    assert updated.annual_rate == pytest.approx(3.8)
    assert updated.kind is AssetKind.SAVINGS
    assert updated.principal == asset.principal
    assert updated.created_at == FIXED_NOW
    assert updated.updated_at == datetime(2024, 2, 1)
    assert store.get_asset(asset.asset_id) == updated


def test_update_asset_cannot_touch_status() -> None:
    store = _store()
    asset = store.create_asset(_payload())

    with pytest.raises(ValueError):
        store.update_asset(asset.asset_id, {"status": "closed"})


def test_delete_asset_removes_record() -> None:
    store = _store()
    asset = store.create_asset(_payload())

    store.delete_asset(asset.asset_id)

    assert store.list_assets() == []
    with pytest.raises(KeyError):
        store.delete_asset(asset.asset_id)


@pytest.mark.parametrize("target", ["matured", "CLOSED", AssetStatus.MATURED])
def test_active_asset_can_mature_or_close(target) -> None:
    store = _store()
    asset = store.create_asset(_payload())

    updated = store.update_status(asset.asset_id, target)

    assert updated.status is not AssetStatus.ACTIVE


def test_terminal_states_reject_further_transitions() -> None:
    store = _store()
    asset = store.create_asset(_payload())
    store.update_status(asset.asset_id, "matured")

    with pytest.raises(AssetTransitionError):
        store.update_status(asset.asset_id, "active")
    with pytest.raises(AssetTransitionError):
        store.update_status(asset.asset_id, "closed")


def test_unknown_status_is_rejected() -> None:
    store = _store()
    asset = store.create_asset(_payload())

    with pytest.raises(ValueError, match="Invalid status"):
        store.update_status(asset.asset_id, "frozen")
    with pytest.raises(KeyError):
        store.update_status("asset_9999", "closed")


def test_portfolio_summary_sums_principal_and_active_interest() -> None:
    store = _store()
    active = store.create_asset(_payload(principal=1_000_000, maturity_date="2025-01-01"))
    closed = store.create_asset(_payload(principal=2_000_000, maturity_date="2025-01-01"))
    store.update_status(closed.asset_id, "closed")

    summary = summarise_portfolio(store.list_assets(), date(2024, 1, 1))

    assert summary.asset_count == 2
    assert summary.active_count == 1
    assert summary.total_principal == pytest.approx(3_000_000.0)
    # 2024-01-01 -> 2025-01-01 is 366 days.
    expected = 1_000_000 * 0.03 * 366 / 365
    assert summary.total_interest_before_tax == pytest.approx(expected)
    assert summary.total_interest_after_tax == pytest.approx(expected * 0.846)
    assert active.asset_id in {asset.asset_id for asset in store.list_assets()}


def test_seed_demo_assets_creates_active_records() -> None:
    store = _store()
    store.seed_demo_assets()

    assets = store.list_assets()
    assert len(assets) == 3
    assert all(asset.status is AssetStatus.ACTIVE for asset in assets)


def test_update_asset_rejects_infinite_principal() -> None:
    store = _store()
    asset = store.create_asset(_payload())

    with pytest.raises(ValueError, match="finite"):
        store.update_asset(asset.asset_id, {"principal": float("inf")})
    assert store.get_asset(asset.asset_id).principal == pytest.approx(1_000_000.0)
