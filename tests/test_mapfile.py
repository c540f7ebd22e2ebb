import pytest

from solong.mapfile import MapError, load_map, read_map, validate_map

VALID = ["1111111", "1P0C0E1", "1111111"]


def write(tmp_path, text, name="level.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_valid_map_passes():
    validate_map(VALID)
    assert VALID[1].count("P") == 1


def test_read_map_round_trip(tmp_path):
    path = write(tmp_path, "\n".join(VALID) + "\n")
    assert read_map(path) == VALID


def test_load_map_returns_rows(tmp_path):
    path = write(tmp_path, "\n".join(VALID))
    assert load_map(path) == VALID


def test_missing_file_raises(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "absent.ber")


def test_blank_line_rejected(tmp_path):
    path = write(tmp_path, "1111111\n\n1P0C0E1\n1111111\n")
    with pytest.raises(MapError):
        read_map(path)


def test_load_map_rejects_invalid(tmp_path):
    path = write(tmp_path, "1111111\n1P000E1\n1111111\n")
    with pytest.raises(MapError):
        load_map(path)


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1PCE1", "10001", "10001", "11111"],  # square
        ["1101111", "1P0C0E1", "1111111"],  # hole in top
        ["1111111", "1P0C0E1", "1111011"],  # hole in bottom
        ["1111111", "0P0C0E1", "1111111"],  # open left side
        ["1111111", "1P0C0E0", "1111111"],  # open right side
        ["1111111", "1P0X0E1", "1111111"],  # unknown cell
        ["1111111", "1P000E1", "1111111"],  # no collectible
        ["1111111", "1P0C0C1", "1111111"],  # no exit
        ["1111111", "1PEC0E1", "1111111"],  # two exits
        ["1111111", "10EC001", "1111111"],  # no player
        ["1111111", "1PPC0E1", "1111111"],  # two players
        ["1111111", "1P1C1E1", "1111111"],  # items walled in
        ["1111111", "1P0C0E101", "1111111"],  # ragged row
        ["1111111", "1111111"],  # too few rows
        [],
    ],
)
def test_invalid_maps_rejected(rows):
    with pytest.raises(MapError):
        validate_map(rows)


def test_map_error_is_value_error():
    with pytest.raises(ValueError):
        validate_map(["1111", "1111"])


def test_multiple_middle_rows_valid():
    rows = ["11111111", "1P0000C1", "10C000E1", "11111111"]
    validate_map(rows)
    assert sum(row.count("C") for row in rows) == 2