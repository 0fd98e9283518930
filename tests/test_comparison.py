import logging
from decimal import Decimal

from stayhub.schemas.room import AvailableRoomType
from stayhub.services.booking import RoomComparison
from tests.conftest import room_type_payload


def make_room(room_id: int, **overrides) -> AvailableRoomType:
    return AvailableRoomType.model_validate(room_type_payload(room_id, **overrides))


class TestSelection:

    def test_caps_at_four_rooms(self, caplog):
        comparison = RoomComparison(max_rooms=4)
        for room_id in range(1, 5):
            assert comparison.add(make_room(room_id)) is True

        with caplog.at_level(logging.WARNING, logger="stayhub"):
            assert comparison.add(make_room(5)) is False

        assert [room.id for room in comparison.rooms] == [1, 2, 3, 4]
        assert comparison.max_reached
        assert "Comparison limit reached" in caplog.text

    def test_duplicate_add_is_a_no_op(self):
        comparison = RoomComparison(max_rooms=4)
        comparison.add(make_room(1))

        assert comparison.add(make_room(1)) is False
        assert len(comparison.rooms) == 1

    def test_toggle_twice_restores_selection(self):
        comparison = RoomComparison(max_rooms=4)
        comparison.add(make_room(1))

        assert comparison.toggle(make_room(2)) is True
        assert comparison.contains(2)
        assert comparison.toggle(make_room(2)) is False
        assert [room.id for room in comparison.rooms] == [1]

    def test_toggle_when_full_does_not_add(self):
        comparison = RoomComparison(max_rooms=2)
        comparison.add(make_room(1))
        comparison.add(make_room(2))

        assert comparison.toggle(make_room(3)) is False
        assert not comparison.contains(3)

    def test_is_comparing_needs_two_rooms(self):
        comparison = RoomComparison(max_rooms=4)
        comparison.add(make_room(1))
        assert not comparison.is_comparing

        comparison.add(make_room(2))
        assert comparison.is_comparing

        comparison.remove(1)
        assert not comparison.is_comparing

    def test_clear(self):
        comparison = RoomComparison(max_rooms=4)
        comparison.add(make_room(1))
        comparison.add(make_room(2))
        comparison.clear()

        assert comparison.rooms == []
        assert not comparison.max_reached


class TestHighlights:

    def test_best_values_are_flagged(self):
        comparison = RoomComparison(max_rooms=4)
        comparison.add(make_room(
            1, base_price=150, room_size=40, max_guests=2, guest_rating=4.8,
            bed_type="King Bed", cancellation_policy="Free cancellation until 24h",
            room_view="Ocean view", private_bathroom=True, free_wifi=True,
        ))
        comparison.add(make_room(
            2, base_price=90, max_guests=4, bed_type="Twin Beds",
            cancellation_policy="Non-refundable", room_view="City view", parking=True,
        ))

        highlights = comparison.highlights()
        first, second = highlights[1], highlights[2]

        assert second["price"].highlight and not first["price"].highlight
        assert first["size"].highlight and not second["size"].highlight
        assert second["size"].value == 25
        assert second["guests"].highlight and not first["guests"].highlight
        assert first["rating"].highlight and not second["rating"].highlight
        assert second["rating"].value == 4.5
        assert first["bed_type"].highlight and not second["bed_type"].highlight
        assert first["cancellation"].highlight and not second["cancellation"].highlight
        assert first["view"].highlight and not second["view"].highlight
        assert first["wifi"].highlight and not second["wifi"].highlight
        assert second["parking"].highlight and not first["parking"].highlight

    def test_ties_flag_every_room(self):
        comparison = RoomComparison(max_rooms=4)
        comparison.add(make_room(1, base_price=100))
        comparison.add(make_room(2, base_price=Decimal("100.00")))

        highlights = comparison.highlights()

        assert highlights[1]["price"].highlight and highlights[2]["price"].highlight

    def test_missing_cancellation_policy_shows_default(self):
        comparison = RoomComparison(max_rooms=4)
        comparison.add(make_room(1))

        feature = comparison.highlights()[1]["cancellation"]

        assert feature.value == "Free Cancellation"
        assert feature.highlight is False

    def test_empty_comparison(self):
        assert RoomComparison(max_rooms=4).highlights() == {}
