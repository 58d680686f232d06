from caritas_sobral.models.editais import EditalForm, EditalStatus


def test_defaults_and_blank_optional_fields() -> None:
    """Should default to "Aberto" and treat blank inputs as missing."""
    form = EditalForm.model_validate(
        {"nome": "  Edital 01/2025  ", "data_publicacao": "2025-01-10", "data_finalizacao": "", "descricao": " "}
    )

    assert form.nome == "Edital 01/2025"
    assert form.status is EditalStatus.OPEN
    assert form.data_finalizacao is None
    assert form.descricao is None


def test_status_values_are_the_displayed_labels() -> None:
    """The stored values are the Portuguese labels."""
    assert [status.value for status in EditalStatus] == ["Aberto", "Em andamento", "Finalizado", "Cancelado"]
