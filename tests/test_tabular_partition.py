from memsim.tabular.partition import Partition


def test_new_partition_is_free_with_its_whole_size():
    partition = Partition(3, 40, 250)
    assert partition.is_free
    assert partition.owner is None
    assert partition.free_space() == 250


def test_occupied_partition_has_no_free_space():
    partition = Partition(0, 0, 128)
    partition.occupy("P1")
    assert partition.owner == "P1"
    assert not partition.is_free
    assert partition.free_space() == 0
    assert partition.size == 128


def test_release_restores_free_space():
    partition = Partition(1, 10, 64)
    partition.occupy("P2")
    partition.release()
    assert partition.is_free
    assert partition.free_space() == 64


def test_occupy_replaces_previous_owner():
    partition = Partition(0, 0, 32)
    partition.occupy("P1")
    partition.occupy("P9")
    assert partition.owner == "P9"