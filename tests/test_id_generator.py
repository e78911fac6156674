"""Tests for atomz.common.id_generator."""

from concurrent.futures import ThreadPoolExecutor

from atomz.common.id_generator import new_id


def test_ids_are_unique():
    ids = [new_id() for _ in range(100_000)]
    assert len(set(ids)) == len(ids)


def test_ids_increase():
    first = new_id()
    second = new_id()
    assert second > first >= 0


def test_concurrent_allocation_is_unique():
    n_threads = 16
    n_per_thread = 1_000

    def allocate(_):
        ids = [new_id() for _ in range(n_per_thread)]
        assert len(set(ids)) == n_per_thread
        return ids

    with ThreadPoolExecutor(max_workers=n_threads) as pool:
        batches = list(pool.map(allocate, range(n_threads)))

    all_ids = [i for batch in batches for i in batch]
    assert len(all_ids) == n_threads * n_per_thread
    assert len(set(all_ids)) == n_threads * n_per_thread
