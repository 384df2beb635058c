from __future__ import annotations

import logging


FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    """Configura o logging do processo (console).

    Chamado apenas pelo entry point; testes usam o ``caplog`` do pytest.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=FORMAT,
        handlers=[logging.StreamHandler()],
        force=True,
    )
