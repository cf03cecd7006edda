from app.schema.form_schema import FormCreate, validate_form_input


def test_valid_input_returns_payload():
    result = validate_form_input({"name": "Survey", "description": "q1"})

    assert result.success is True
    assert result.data == FormCreate(name="Survey", description="q1")
    assert result.errors == []


def test_description_is_optional():
    result = validate_form_input({"name": "Poll"})

    assert result.success is True
    assert result.data.description is None


def test_short_name_reports_field_error():
    result = validate_form_input({"name": "abc"})

    assert result.success is False
    assert result.data is None
    assert [err["field"] for err in result.errors] == ["name"]


def test_missing_name_and_wrong_description_type():
    result = validate_form_input({"description": 42})

    assert result.success is False
    assert {err["field"] for err in result.errors} == {"name", "description"}


def test_non_mapping_input_is_rejected():
    result = validate_form_input("Survey")

    assert result.success is False
    assert result.errors


def test_explicit_null_description_is_rejected():
    result = validate_form_input({"name": "Survey", "description": None})

    assert result.success is False
    assert [err["field"] for err in result.errors] == ["description"]
