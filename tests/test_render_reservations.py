"""
Tests for joining reservations with the slot catalog.
"""

from __future__ import annotations

from types import MappingProxyType

from slotbook.application.use_cases.render_reservations import ReservationRenderer
from slotbook.domain.entities.catalog import EMPTY_CATALOG, CatalogEntry
from slotbook.domain.entities.reservation import Reservation

CATALOG = MappingProxyType(
    {
        "sl1": CatalogEntry(service_label="Haircut", datetime="2024-01-01T10:00", service_id="s1"),
        "sl2": CatalogEntry(service_label="Massage (60 min)", datetime="2024-01-02T09:00", service_id="s2"),
    }
)


def test_known_slot_uses_catalog_entry():
    records = ReservationRenderer().render(
        [Reservation(id="r1", slot_id="sl1", created_at="2023-12-01")],
        CATALOG,
    )

    assert len(records) == 1
    record = records[0]
    assert record.reservation_id == "r1"
    assert record.service_label == "Haircut"
    assert record.datetime == "2024-01-01T10:00"
    assert record.created_at_line == "Réservé le 2023-12-01"
    assert record.placeholder is False


def test_unknown_slot_uses_fallback_text():
    records = ReservationRenderer().render([Reservation(id="r2", slot_id="ghost")], CATALOG)

    assert records[0].service_label == "Créneau ghost"
    assert records[0].datetime == "Date inconnue"
    assert records[0].created_at_line is None


def test_missing_slot_id_renders_unknown():
    records = ReservationRenderer().render([Reservation(id="r3")], CATALOG)

    assert records[0].service_label == "Créneau inconnu"
    assert records[0].datetime == "Date inconnue"


def test_empty_catalog_falls_back_for_every_reservation():
    records = ReservationRenderer().render(
        [Reservation(id="r1", slot_id="sl1"), Reservation(id="r2", slot_id="sl2")],
        EMPTY_CATALOG,
    )

    assert [r.service_label for r in records] == ["Créneau sl1", "Créneau sl2"]


def test_input_order_is_preserved():
    reservations = [
        Reservation(id="r3", slot_id="sl2"),
        Reservation(id="r1", slot_id="ghost"),
        Reservation(id="r2", slot_id="sl1"),
    ]

    records = ReservationRenderer().render(reservations, CATALOG)

    assert [r.reservation_id for r in records] == ["r3", "r1", "r2"]


def test_empty_list_renders_single_placeholder():
    records = ReservationRenderer().render([], CATALOG)

    assert len(records) == 1
    assert records[0].placeholder is True
    assert records[0].service_label == "Aucune réservation"


def test_non_collection_renders_placeholder():
    for value in (None, {"id": "r1"}, "r1"):
        records = ReservationRenderer().render(value, CATALOG)
        assert len(records) == 1
        assert records[0].placeholder is True
