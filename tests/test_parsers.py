import pytest

from viewer.errors import UnsupportedFileType
from viewer.parsers import file_extension, parse_csv, parse_jsonl, parse_upload


def test_csv_rows_follow_header_order():
    text = "name,score,city\nAlice,10,Paris\nBob,20,Lima\nCara,30,Oslo\n"
    rows = parse_csv(text)
    assert len(rows) == 3
    for row in rows:
        assert [k for k in row if k != "id"] == ["name", "score", "city"]
    assert rows[1] == {"id": 2, "name": "Bob", "score": "20", "city": "Lima"}


def test_csv_short_rows_pad_and_long_rows_truncate():
    rows = parse_csv("a,b,c\n1\n1,2,3,4,5\n")
    assert rows[0] == {"id": 1, "a": "1", "b": "", "c": ""}
    assert rows[1] == {"id": 2, "a": "1", "b": "2", "c": "3"}


def test_csv_trims_and_strips_quotes():
    rows = parse_csv('"first name" , "age"\r\n "Ann" ,"41"\r\n')
    assert rows == [{"id": 1, "first name": "Ann", "age": "41"}]


def test_csv_skips_blank_lines():
    rows = parse_csv("\n\nx,y\n\n1,2\n   \n3,4\n")
    assert [r["id"] for r in rows] == [1, 2]
    assert rows[1]["x"] == "3"


def test_csv_quoted_commas_are_split():
    rows = parse_csv('title,year\n"Hello, world",2020\n')
    assert rows[0] == {"id": 1, "title": "Hello", "year": "world"}


def test_csv_id_header_overwrites_sequence_value():
    rows = parse_csv("id,name\n77,x\n")
    assert list(rows[0]) == ["id", "name"]
    assert rows[0]["id"] == "77"


@pytest.mark.parametrize("text", ["", "\n\n", "only,header\n"])
def test_csv_without_data_lines_is_empty(text):
    assert parse_csv(text) == []


def test_jsonl_malformed_line_is_wrapped_not_dropped():
    lines = ['{"a": 1}', '{"a": 2}', '{not json', '{"a": 4}', '{"a": 5}']
    rows = parse_jsonl("\n".join(lines))
    assert len(rows) == 5
    assert rows[2] == {"id": 3, "data": "{not json"}
    assert rows[4] == {"id": 5, "a": 5}


def test_jsonl_literal_id_wins_but_keeps_position():
    rows = parse_jsonl('{"name": "x", "id": 99}\n')
    assert rows == [{"id": 99, "name": "x"}]
    assert list(rows[0]) == ["id", "name"]


def test_jsonl_non_object_values_are_wrapped():
    rows = parse_jsonl('[1, 2]\n"text"\n')
    assert rows == [{"id": 1, "data": [1, 2]}, {"id": 2, "data": "text"}]


def test_jsonl_non_standard_constants_keep_raw_text():
    rows = parse_jsonl('{"a": 1}\n{"a": NaN}\nInfinity\n-Infinity\n')
    assert rows == [
        {"id": 1, "a": 1},
        {"id": 2, "data": '{"a": NaN}'},
        {"id": 3, "data": "Infinity"},
        {"id": 4, "data": "-Infinity"},
    ]


def test_jsonl_ids_count_only_non_blank_lines():
    rows = parse_jsonl('\n{"a": 1}\n\n\n{"a": 2}\n')
    assert [r["id"] for r in rows] == [1, 2]


def test_jsonl_empty_input():
    assert parse_jsonl("  \n") == []


@pytest.mark.parametrize(
    "filename, expected",
    [("data.csv", "csv"), ("DATA.JSONL", "jsonl"), ("archive.tar.gz", "gz"), ("README", "")],
)
def test_file_extension(filename, expected):
    assert file_extension(filename) == expected


def test_parse_upload_dispatches_on_extension():
    assert parse_upload("Scores.CSV", "a\n1\n") == [{"id": 1, "a": "1"}]
    assert parse_upload("events.jsonl", '{"a": 1}\n') == [{"id": 1, "a": 1}]


@pytest.mark.parametrize("filename", ["data.json", "data.parquet", "noext"])
def test_parse_upload_rejects_other_extensions(filename):
    with pytest.raises(UnsupportedFileType):
        parse_upload(filename, "a\n1\n")
