import pytest

from algoritma.hash_table import HashTable


@pytest.fixture
def table():
    t = HashTable(5)
    for value in (21, 32, 19, 37):
        t.insert(value)
    return t


def test_buckets_after_collision(table):
    assert table.buckets() == [[], [21], [32, 37], [], [19]]


def test_contains(table):
    assert 37 in table
    assert 5 not in table


def test_remove(table):
    table.remove(37)
    assert 37 not in table
    assert table.buckets()[2] == [32]


def test_remove_all_occurrences():
    t = HashTable(3)
    for value in (4, 4, 7, 4):
        t.insert(value)
    t.remove(4)
    assert t.buckets() == [[], [7], []]


def test_remove_missing_is_harmless(table):
    before = table.buckets()
    table.remove(100)
    assert table.buckets() == before


def test_format_table(table):
    table.remove(37)
    assert table.format_table() == "0 --> \n1 --> 21 \n2 --> 32 \n3 --> \n4 --> 19 \n"


def test_len(table):
    assert len(table) == 4


def test_buckets_returns_copy(table):
    table.buckets()[1].append(99)
    assert 99 not in table


def test_invalid_size():
    with pytest.raises(ValueError):
        HashTable(0)


def test_every_value_lands_in_its_bucket():
    t = HashTable(7)
    values = list(range(-10, 30))
    for value in values:
        t.insert(value)
    for index, bucket in enumerate(t.buckets()):
        assert all(value % 7 == index for value in bucket)
    assert all(value in t for value in values)