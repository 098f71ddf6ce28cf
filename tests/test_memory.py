import io

import pytest

from ossim.memory import MemoryManager, OutOfMemoryError


def make(total=8, frame_size=4):
    return MemoryManager(total, frame_size, out=io.StringIO())


def test_initial_state_is_free():
    mem = make(40, 4)
    assert mem.memory == (None,) * 40
    assert mem.total_frames == 40 // 4
    assert mem.frame_table == (None,) * mem.total_frames
    assert mem.page_tables == {}


def test_first_fit_takes_lowest_free_run():
    mem = make()
    assert mem.allocate_first_fit(1, 3) == 0
    assert mem.allocate_first_fit(2, 2) == 3
    assert mem.memory[:5] == (1, 1, 1, 2, 2)


def test_free_releases_only_owner_blocks():
    mem = make()
    mem.allocate_first_fit(1, 3)
    mem.allocate_first_fit(2, 2)
    mem.free(1)
    assert 1 not in mem.memory
    assert mem.memory.count(2) == 2


def test_allocation_compacts_when_fragmented():
    out = io.StringIO()
    mem = MemoryManager(8, 4, out=out)
    mem.allocate_first_fit(1, 2)
    mem.allocate_first_fit(2, 2)
    mem.allocate_first_fit(3, 2)
    mem.free(2)
    start = mem.allocate_first_fit(4, 3)
    assert start == 4
    assert mem.memory == (1, 1, 3, 3, 4, 4, 4, None)
    assert "INICIANDO COMPACTACION" in out.getvalue()
    assert "(despues de compactar)" in out.getvalue()


def test_allocation_failure_raises():
    mem = make()
    mem.allocate_first_fit(1, 6)
    with pytest.raises(OutOfMemoryError) as info:
        mem.allocate_first_fit(2, 3)
    assert info.value.pid == 2
    assert info.value.needed == 3
    assert mem.memory.count(2) == 0


def test_find_first_fit_returns_none_without_space():
    mem = make()
    mem.allocate_first_fit(1, 8)
    assert mem.find_and_allocate_first_fit(2, 1) is None


def test_compact_keeps_order_and_count():
    mem = make()
    mem.allocate_first_fit(1, 2)
    mem.allocate_first_fit(2, 2)
    mem.allocate_first_fit(3, 2)
    mem.free(1)
    mem.compact()
    assert mem.memory == (2, 2, 3, 3, None, None, None, None)


def test_render_memory_format():
    mem = MemoryManager(3, 1, out=io.StringIO())
    mem.allocate_first_fit(7, 1)
    assert mem.render_memory() == "=== Mapa de Memoria ===\n[7][ ][ ]"


@pytest.mark.parametrize("size", [1, 4, 5, 8, 10])
def test_pages_needed_covers_size(size):
    mem = make(40, 4)
    pages = mem.pages_needed(size)
    assert pages * 4 >= size
    assert (pages - 1) * 4 < size


def test_paged_allocation_and_free():
    mem = make(40, 4)
    frames = mem.allocate_paged(2, 3)
    assert frames == [0, 1, 2]
    assert mem.page_tables == {2: (0, 1, 2)}
    assert mem.frame_table[:4] == (2, 2, 2, None)
    mem.free_paged(2)
    assert mem.page_tables == {}
    assert mem.frame_table == (None,) * mem.total_frames


def test_paged_allocation_skips_used_frames():
    mem = make(16, 4)
    mem.allocate_paged(1, 2)
    mem.allocate_paged(2, 1)
    mem.free_paged(1)
    assert mem.allocate_paged(3, 3) == [0, 1, 3]


def test_paged_allocation_failure():
    mem = make(8, 4)
    with pytest.raises(OutOfMemoryError):
        mem.allocate_paged(1, 3)
    assert mem.frame_table == (None, None)
    assert mem.page_tables == {}


def test_free_paged_unknown_pid_is_silent():
    out = io.StringIO()
    mem = MemoryManager(8, 4, out=out)
    before = out.getvalue()
    mem.free_paged(99)
    assert out.getvalue() == before


def test_render_tables():
    mem = make(8, 4)
    mem.allocate_paged(5, 1)
    assert mem.render_frame_table() == "=== Frame Table (2 frames) ===\n[5][ ]"
    assert mem.render_page_tables() == "=== Page Tables ===\nPID 5: [F0]"


def test_invalid_frame_size():
    with pytest.raises(ValueError):
        MemoryManager(8, 0, out=io.StringIO())