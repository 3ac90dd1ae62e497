import pytest

from tddbook.toolbox.sorting import SortDirection, get_sorted_values, get_values


@pytest.mark.parametrize(
    "key, value", [(3, "W"), (-5, "Z"), (100, ""), (0, "replaced"), (50, "M")]
)
def test_get_sorted_values_asc(key, value):
    values = {99: "B", 0: "A"}
    values[key] = value
    keys = sorted(values)

    result = get_sorted_values(values, SortDirection.ASC)

    assert len(result) == len(keys)
    for index, item in enumerate(result):
        assert values[keys[index]] == item


def test_get_sorted_values_seed_case():
    values = {99: "B", 0: "A", 3: "W"}
    assert get_sorted_values(values, SortDirection.ASC) == ["A", "W", "B"]
    assert get_sorted_values(values, SortDirection.DESC) == ["B", "W", "A"]


def test_desc_is_reverse_of_asc():
    values = {2: "B", 4: "D", 3: "C", 1: "A"}
    asc = get_sorted_values(values, SortDirection.ASC)
    assert get_sorted_values(values, SortDirection.DESC) == asc[::-1]


def test_empty_mapping():
    assert get_sorted_values({}, SortDirection.ASC) == []


def test_none_input_rejected():
    with pytest.raises(ValueError, match="cannot sort nil input map"):
        get_sorted_values(None, SortDirection.ASC)


def test_unknown_direction_rejected():
    with pytest.raises(ValueError, match="sort direction not recognised"):
        get_sorted_values({1: "A"}, "asc")


def test_get_values():
    values = {2: "B", 4: "D", 3: "C", 1: "A"}
    assert get_values(values, "asc") == ["A", "B", "C", "D"]
    assert get_values(values, "desc") == ["D", "C", "B", "A"]


def test_get_values_unknown_direction_keeps_contents():
    values = {2: "B", 4: "D", 3: "C", 1: "A"}
    assert sorted(get_values(values, "sideways")) == ["A", "B", "C", "D"]