from __future__ import annotations

from pathlib import Path

import pytest

NVR_REPORT = """RELATÓRIO DE STATUS DO SISTEMA NVR - 15/03/2024
Período: Março 2024

RESUMO GERAL
============
Total de NVRs: 12
Câmeras: 100
Slots Vazios: 5
Taxa de Ocupação: 85%
Custo Estimado: R$ 1.500,00
Backup Ativo: sim

NVRs EM ESTADO CRÍTICO
======================
Marina X - NVR 5: Sem HD ativo
Marina Bracuí - NVR 12: HD com falha: setor 3
Verificar com a equipe de campo

INVENTÁRIO
==========
Marina,Numeração,Modelo,Slots
Marina X,5,NVR-16,16
Marina Bracuí,12,NVR-8,8
Marina Y,7
"""

HD_REPORT = """RELATÓRIO DE EVOLUÇÃO DE HDs - 01/04/2024

RESUMO GERAL
============
NVRs Analisados: 4
Slots Livres: 10

COMPRA DOS NVRS
===============
Marina\tModelo\tSlots\tCusto
Marina A\tNVR-16\t16\tR$ 2.000,00
Marina B\tNVR-8\t8\tR$ 1.200,50
Marina C\tNVR-8\tpendente\tR$ 900,00
"""

MINIMAL_REPORT = """RESUMO GERAL
============
Câmeras: 100
Slots Vazios: 5"""


@pytest.fixture()
def nvr_report_text() -> str:
    return NVR_REPORT


@pytest.fixture()
def hd_report_text() -> str:
    return HD_REPORT


@pytest.fixture()
def minimal_report_text() -> str:
    return MINIMAL_REPORT


@pytest.fixture()
def nvr_report_file(tmp_path: Path) -> Path:
    path = tmp_path / "status_nvr.txt"
    path.write_text(NVR_REPORT, encoding="utf-8")
    return path
