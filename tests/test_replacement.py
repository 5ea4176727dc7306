"""Tests for the page replacement algorithms on their own."""

from types import SimpleNamespace

import pytest

from main_memory import FrameDirectory
from replacement import POLICIES, FIFOPolicy, LRUPolicy, OPTPolicy, make_policy


def resident(pages, clock=0):
    """A stand-in memory with ``pages[i]`` living in frame i."""
    directory = FrameDirectory(len(pages))
    for frame_number, page_number in enumerate(pages):
        directory.bind(frame_number, page_number)
    return SimpleNamespace(size=len(pages), frame_directory=directory, clock=clock)


class TestFIFOPolicy:
    def test_evicts_in_load_order(self) -> None:
        policy = FIFOPolicy()
        for frame_number in (0, 1, 2):
            policy.loaded(frame_number)
        assert policy.victim(None) == 0
        policy.loaded(0)
        assert policy.victim(None) == 1
        assert policy.victim(None) == 2
        assert policy.victim(None) == 0


class TestLRUPolicy:
    def test_evicts_oldest_reference(self) -> None:
        mem = SimpleNamespace(size=3, last_used=[5, 2, 9])
        assert LRUPolicy().victim(mem) == 1

    def test_tie_goes_to_lowest_frame(self) -> None:
        mem = SimpleNamespace(size=3, last_used=[4, 1, 1])
        assert LRUPolicy().victim(mem) == 1


class TestOPTPolicy:
    def test_evicts_farthest_next_use(self) -> None:
        #            position: 0  1  2  3  4  5
        policy = OPTPolicy([10, 11, 12, 12, 10, 11])
        mem = resident([10, 11, 12], clock=2)
        assert policy.victim(mem) == 1

    def test_never_used_again_goes_first(self) -> None:
        policy = OPTPolicy([10, 11, 12, 10, 12])
        mem = resident([10, 11, 12], clock=2)
        assert policy.victim(mem) == 1

    def test_first_frame_among_unused(self) -> None:
        """When several pages never come back, the lowest frame loses."""
        policy = OPTPolicy([10, 11, 12, 11])
        mem = resident([12, 10, 11], clock=2)
        assert policy.victim(mem) == 0

    def test_current_position_is_not_a_future_use(self) -> None:
        policy = OPTPolicy([10, 11, 10])
        mem = resident([10, 11], clock=2)
        assert policy.victim(mem) == 0

    def test_single_frame(self) -> None:
        policy = OPTPolicy([1, 2, 1])
        assert policy.victim(resident([1], clock=1)) == 0


class TestMakePolicy:
    @pytest.mark.parametrize("name", POLICIES)
    def test_known_names(self, name) -> None:
        assert make_policy(name, references=[]).name == name

    def test_unknown_name(self) -> None:
        with pytest.raises(ValueError):
            make_policy("CLOCK")

    def test_opt_needs_references(self) -> None:
        with pytest.raises(ValueError):
            make_policy("OPT")
