from __future__ import annotations

import json
from pathlib import Path

import pytest

from nvr_reports.report_parser import engine, sources
from nvr_reports.report_parser.values import Number
from nvr_reports.scripts import parse_reports


def test_read_plain_text(nvr_report_file: Path) -> None:
    text = sources.read_document(nvr_report_file)
    assert engine.identify_report_type(text) == "nvr"


def test_read_ignores_invalid_bytes(tmp_path: Path) -> None:
    path = tmp_path / "resumo.txt"
    path.write_bytes("RESUMO GERAL\n============\nCâmeras: 100\n".encode("utf-8") + b"\xff\n")
    report = engine.parse_report(sources.read_document(path))
    assert report.summary["Câmeras"] == Number(100)


@pytest.mark.parametrize("name", ["relatorio.pdf", "relatorio.docx", "relatorio.html"])
def test_non_text_suffix_raises(tmp_path: Path, name: str) -> None:
    path = tmp_path / name
    path.write_bytes(b"%PDF-1.4")
    with pytest.raises(sources.DocumentReadError):
        sources.read_document(path)


def test_missing_text_file_raises(tmp_path: Path) -> None:
    with pytest.raises(sources.DocumentReadError):
        sources.read_document(tmp_path / "ausente.txt")


def test_cli_identify(nvr_report_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    parse_reports.main(["identify", str(nvr_report_file)])
    out = capsys.readouterr().out
    assert out.strip().endswith("\tnvr")


def test_cli_parse_json(nvr_report_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    parse_reports.main(["parse", str(nvr_report_file), "--format", "json"])
    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "RELATÓRIO DE STATUS DO SISTEMA NVR"
    assert len(data["summary"]["criticalNVRs"]) == 2


def test_cli_parse_csv_to_file(nvr_report_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "out" / "status.csv"
    parse_reports.main(["parse", str(nvr_report_file), "--format", "csv", "--output", str(output)])
    content = output.read_text(encoding="utf-8")
    assert content.startswith("Título,RELATÓRIO DE STATUS DO SISTEMA NVR\n")


def test_cli_summary(nvr_report_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
    parse_reports.main(["summary", str(nvr_report_file)])
    payload = json.loads(capsys.readouterr().out)
    assert payload["kind"] == "nvr"
    assert payload["summary"]["Slots Vazios"] == 5
    assert {"name": "Câmeras", "value": 100.0} in payload["statistics"]


def test_cli_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        parse_reports.main(["parse", str(tmp_path / "nada.txt")])


def test_cli_rejects_non_text_report(tmp_path: Path) -> None:
    path = tmp_path / "relatorio.pdf"
    path.write_bytes(b"%PDF-1.4")
    with pytest.raises(SystemExit):
        parse_reports.main(["identify", str(path)])
