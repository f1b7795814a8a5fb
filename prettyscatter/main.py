from __future__ import annotations

import json
import sys
from typing import List, Optional

from prettyscatter.api.scatter_facade import ScatterBackend
from prettyscatter.io_utils.cli_args import build_arg_parser, config_from_namespace
from prettyscatter.io_utils.layout_export import export_placements_to_file
from prettyscatter.io_utils.loader import load_scene_from_file


def main(argv: Optional[List[str]] = None) -> int:
    """
    Lê uma cena em JSON, calcula o layout e grava as posições em CSV.

    Retorna 0 se os elementos foram espalhados e 1 se o layout original
    deve ser mantido. Erros de entrada (arquivo ausente, JSON inválido,
    campos faltando) encerram o programa com mensagem de erro.
    """
    parser = build_arg_parser()
    args = parser.parse_args(args=argv)

    try:
        config = config_from_namespace(args)
        scene = load_scene_from_file(args.scene)
    except (OSError, KeyError, ValueError) as exc:
        raise SystemExit(f"Erro ao carregar a cena: {exc}")

    backend = ScatterBackend(config)
    print(f"Calculando layout de {len(scene.elements)} elementos a partir de {args.scene}...")
    try:
        result = backend.plan_layout(scene)
    except ValueError as exc:
        raise SystemExit(f"Cena inválida: {exc}")

    for message in result["logs"]:
        print(message)

    export_placements_to_file(backend.last_plan, args.out)

    if result["scattered"]:
        print(f"Posições gravadas em {args.out}.")
        return 0

    print(json.dumps({"failure_reason": result["failure_reason"]}, ensure_ascii=False))
    return 1


if __name__ == "__main__":
    sys.exit(main())
