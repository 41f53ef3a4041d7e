# Unit tests for the rule chains and the body -> column mapping
import pytest

from bots_api.api.validation import as_string, body, is_positive, param, run_stage
from bots_api.schemas.bot import to_columns


def price_chain():
    return (
        body("price")
        .is_numeric("Valor no válido")
        .not_empty("El precio de Bot no puede ir vacío")
        .custom(is_positive, "Precio no válido")
    )


def test_missing_price_fails_every_rule():
    errors = price_chain().run({})
    assert [e["msg"] for e in errors] == [
        "Valor no válido",
        "El precio de Bot no puede ir vacío",
        "Precio no válido",
    ]
    # Absent values carry no "value" key
    assert all("value" not in e for e in errors)


@pytest.mark.parametrize("price,expected", [
    (50, 0),
    (0.5, 0),
    ("12.75", 0),
    (0, 1),
    (-3, 1),
    ("Hola", 2),
    ("", 3),
    ("5\n", 1),
    (int("9" * 400), 2),
    ("9" * 400, 2),
])
def test_price_error_counts(price, expected):
    assert len(price_chain().run({"price": price})) == expected


@pytest.mark.parametrize("value,valid", [
    ("1", True),
    ("2000", True),
    ("-4", True),
    ("not-valid-url", False),
    ("1.5", False),
    ("1\n", False),
    ("", False),
])
def test_is_int(value, valid):
    errors = param("id").is_int("ID no válido").run({"id": value})
    assert (errors == []) is valid


@pytest.mark.parametrize("value,valid", [
    (True, True),
    (False, True),
    ("true", True),
    ("0", True),
    (1, True),
    ("yes", False),
    (None, False),
])
def test_is_boolean(value, valid):
    errors = body("availability").is_boolean("x").run({"availability": value})
    assert (errors == []) is valid


def test_not_empty_rejects_null_and_empty_string():
    chain = body("name").not_empty("El nombre de Bot no puede ir vacío")
    assert len(chain.run({"name": None})) == 1
    assert len(chain.run({"name": ""})) == 1
    assert chain.run({"name": "GPT 8"}) == []


def test_error_entry_shape():
    [error] = body("name").not_empty("vacío").run({"name": ""})
    assert error == {"type": "field", "value": "", "msg": "vacío", "path": "name", "location": "body"}


def test_stage_reads_params_and_body_separately():
    chains = [param("id").is_int("ID no válido"), body("name").not_empty("vacío")]
    errors = run_stage(chains, {"id": "abc"}, {"name": "ok"})
    assert [e["location"] for e in errors] == ["params"]


def test_as_string_matches_json_forms():
    assert as_string(True) == "true"
    assert as_string(50.0) == "50"
    assert as_string(None) == ""


def test_to_columns_maps_and_coerces():
    columns = to_columns({
        "id": 99,
        "name": "GPT 8",
        "price": "17",
        "availability": "false",
        "basePersonality": "Amigable",
        "useCaseTemplate": None,
        "createdAt": "2020-01-01",
    })
    assert columns == {
        "name": "GPT 8",
        "price": 17.0,
        "availability": False,
        "base_personality": "Amigable",
        "use_case_template": None,
    }


def test_to_columns_skips_null_required_columns():
    assert to_columns({"availability": None, "name": None}) == {}


def test_to_columns_stores_structured_text_as_json():
    columns = to_columns({"description": {"tono": "formal"}, "humor": ["ligero", "seco"]})
    assert columns == {
        "description": '{"tono": "formal"}',
        "humor": '["ligero", "seco"]',
    }
