from __future__ import annotations

import random
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence

from prettyscatter.config import ScatterConfig
from prettyscatter.core.models import DistributionResult, ElementBox, Rect
from prettyscatter.io_utils.layout_export import distribution_to_dict, plan_to_dict
from prettyscatter.layout import LayoutPlan, ScatterScene, plan_layout
from prettyscatter.sampling.exclusion_zones import normalize_exclusion_zones
from prettyscatter.sampling.radius_search import find_distribution


_FAILURE_MESSAGES = {
    "COUNT_MISMATCH": "a quantidade de pontos não convergiu para a quantidade alvo",
    "RADIUS_TOO_SMALL": "a quantidade só convergiu com raio abaixo do mínimo permitido",
    "VIEWPORT_TOO_NARROW": "a janela está abaixo da largura mínima configurada",
    "NO_ELEMENTS": "a cena não possui elementos",
}


class ScatterBackend:
    """
    Fachada (Facade) stateful para o espalhamento de elementos.

    Mantém a configuração da sessão, o gerador de números aleatórios, a
    última cena recebida e um buffer de mensagens de log. Cada chamada de
    cálculo é independente: a grade e a fila ativa do amostrador são
    criadas e descartadas dentro da chamada. A fachada não deve ser
    usada por mais de uma chamada simultânea.
    """

    def __init__(
        self,
        config: Optional[ScatterConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config if config is not None else ScatterConfig()
        self.rng = rng if rng is not None else self.config.make_rng()
        self.last_scene: Optional[ScatterScene] = None
        self.last_plan: Optional[LayoutPlan] = None
        self.log_buffer: List[str] = []

    def log(self, message: str) -> None:
        self.log_buffer.append(message)

    def consume_logs(self) -> List[str]:
        logs = list(self.log_buffer)
        self.log_buffer.clear()
        return logs

    def _log_distribution(self, result: DistributionResult, target_count: int) -> None:
        seed_failures = sum(1 for a in result.attempts if a.seed_failed)
        if seed_failures:
            self.log(
                f"Amostrador sem ponto inicial válido em {seed_failures} de "
                f"{result.iterations} tentativas."
            )
        if result.success:
            self.log(
                f"Distribuição encontrada: {target_count} pontos com raio "
                f"{result.radius:.2f} após {result.iterations} tentativas."
            )
        else:
            reason = result.failure_reason.value if result.failure_reason else ""
            self.log(
                f"Falha na distribuição de {target_count} pontos após "
                f"{result.iterations} tentativas: {_FAILURE_MESSAGES.get(reason, reason)}."
            )

    # ------------------------------------------------------------------
    # Cálculo direto
    # ------------------------------------------------------------------

    def compute_distribution(
        self,
        width: float,
        height: float,
        point_radius: float,
        target_count: int,
        exclusion_zones: Sequence[Rect] = (),
        normalize: bool = True,
    ) -> Dict[str, Any]:
        """
        Calcula uma distribuição de pontos a partir de valores numéricos.

        Se `normalize` for verdadeiro, as zonas (já no referencial local
        do domínio) passam pelo ajuste às bordas antes da busca.

        Retorno:
            Dicionário de `distribution_to_dict` acrescido da chave
            "logs".
        """
        zones = list(exclusion_zones)
        if normalize:
            zones = normalize_exclusion_zones(zones, width, height, point_radius)

        result = find_distribution(
            width,
            height,
            point_radius,
            target_count,
            zones,
            config=self.config,
            rng=self.rng,
        )
        self._log_distribution(result, target_count)

        data = distribution_to_dict(result)
        data["logs"] = self.consume_logs()
        return data

    # ------------------------------------------------------------------
    # Passagens de layout
    # ------------------------------------------------------------------

    def plan_layout(self, scene: ScatterScene) -> Dict[str, Any]:
        """
        Executa uma passagem de layout e memoriza a cena para futuras
        chamadas de `relayout`.

        Retorno:
            Dicionário de `plan_to_dict`, com os logs da passagem.
        """
        self.last_scene = scene
        plan = plan_layout(scene, config=self.config, rng=self.rng)
        self.last_plan = plan

        if plan.distribution is not None:
            self._log_distribution(plan.distribution, len(scene.elements))
        elif plan.failure_reason is not None:
            reason = plan.failure_reason.value
            self.log(f"Layout original mantido: {_FAILURE_MESSAGES.get(reason, reason)}.")

        return plan_to_dict(plan, logs=self.consume_logs())

    def relayout(
        self,
        viewport_width: Optional[float] = None,
        container: Optional[ElementBox] = None,
    ) -> Dict[str, Any]:
        """
        Refaz a última passagem de layout com nova geometria, como após um
        redimensionamento da janela.

        Raises:
            RuntimeError:
                Se nenhuma cena tiver sido recebida antes.
        """
        if self.last_scene is None:
            raise RuntimeError("Nenhuma cena registrada para refazer o layout.")

        scene = self.last_scene
        if viewport_width is not None:
            scene = replace(scene, viewport_width=viewport_width)
        if container is not None:
            scene = replace(scene, container=container)
        return self.plan_layout(scene)


__all__ = ["ScatterBackend"]
