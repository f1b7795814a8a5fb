from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple


class FailureReason(Enum):
    """
    Motivos pelos quais uma distribuição de pontos não foi aceita.

    Todos os valores representam resultados esperados da heurística (ou
    da camada de adaptação), e não erros de programação:

    - COUNT_MISMATCH:
        A quantidade de pontos nunca coincidiu com a quantidade alvo
        dentro do limite de iterações.
    - RADIUS_TOO_SMALL:
        A quantidade coincidiu, mas apenas com um raio abaixo do mínimo
        permitido (os elementos ficariam sobrepostos).
    - VIEWPORT_TOO_NARROW:
        A largura da janela de visualização está abaixo do mínimo
        configurado; o layout original deve ser mantido.
    - NO_ELEMENTS:
        A cena não possui elementos a serem espalhados.
    """

    COUNT_MISMATCH = "COUNT_MISMATCH"
    RADIUS_TOO_SMALL = "RADIUS_TOO_SMALL"
    VIEWPORT_TOO_NARROW = "VIEWPORT_TOO_NARROW"
    NO_ELEMENTS = "NO_ELEMENTS"


@dataclass(frozen=True)
class Point:
    """
    Coordenada 2D no sistema local do domínio de amostragem.

    A identidade de um ponto é o seu valor: dois pontos com as mesmas
    coordenadas são considerados iguais.
    """

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass
class Sample:
    """
    Amostra aceita durante a geração de pontos.

    Guarda o ponto aceito e uma referência à amostra que o originou
    (`parent`). A referência serve apenas para rastrear a procedência
    durante a geração e nunca é percorrida; a amostra semente não possui
    pai.
    """

    point: Point
    parent: Optional["Sample"] = None

    @property
    def x(self) -> float:
        return self.point.x

    @property
    def y(self) -> float:
        return self.point.y


@dataclass(frozen=True)
class Rect:
    """
    Retângulo alinhado aos eixos usado como zona de exclusão.

    As coordenadas seguem a convenção de tela: `top` cresce para baixo,
    portanto `top <= bottom`. Da mesma forma `left <= right`. Um
    retângulo inválido gera `ValueError` na construção.

    Atributos:
        left:
            Borda esquerda (menor X).
        right:
            Borda direita (maior X).
        top:
            Borda superior (menor Y).
        bottom:
            Borda inferior (maior Y).
    """

    left: float
    right: float
    top: float
    bottom: float

    def __post_init__(self) -> None:
        if self.left > self.right:
            raise ValueError(
                f"Retângulo inválido: left ({self.left}) maior que right ({self.right})."
            )
        if self.top > self.bottom:
            raise ValueError(
                f"Retângulo inválido: top ({self.top}) maior que bottom ({self.bottom})."
            )

    def contains(self, x: float, y: float) -> bool:
        """Indica se (x, y) está dentro do retângulo, bordas incluídas."""
        return self.left <= x <= self.right and self.top <= y <= self.bottom


@dataclass(frozen=True)
class ElementBox:
    """
    Caixa delimitadora de um elemento visual em um referencial ancestral
    comum.

    É o formato em que a camada de adaptação entrega as medições: posição
    do canto superior esquerdo e dimensões. Contêiner e zonas de exclusão
    devem ser medidos em relação ao mesmo ancestral.
    """

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def to_rect(self) -> Rect:
        return Rect(left=self.left, right=self.right, top=self.top, bottom=self.bottom)


@dataclass
class AttemptRecord:
    """
    Registro de uma chamada do amostrador durante a busca de raio.

    Atributos:
        iteration:
            Número sequencial da tentativa (começando em 1).
        radius:
            Raio de teste usado na tentativa.
        count:
            Quantidade de pontos devolvida pelo amostrador. Zero indica
            falha na escolha do ponto inicial.
    """

    iteration: int
    radius: float
    count: int

    @property
    def seed_failed(self) -> bool:
        return self.count == 0


@dataclass
class DistributionResult:
    """
    Resultado da busca adaptativa de raio.

    Em caso de sucesso, `points` contém exatamente a quantidade alvo de
    pontos. Em caso de falha, `points` é sempre vazio e `failure_reason`
    indica o motivo.

    Atributos:
        success:
            Indica se a distribuição foi aceita.
        points:
            Pontos aceitos, na ordem em que foram gerados.
        radius:
            Raio usado na última tentativa executada.
        iterations:
            Número de chamadas ao amostrador.
        failure_reason:
            Motivo da falha, ou `None` em caso de sucesso.
        attempts:
            Histórico de tentativas (raio e quantidade obtida).
    """

    success: bool
    points: List[Point]
    radius: float
    iterations: int
    failure_reason: Optional[FailureReason] = None
    attempts: List[AttemptRecord] = field(default_factory=list)


__all__: Sequence[str] = [
    "FailureReason",
    "Point",
    "Sample",
    "Rect",
    "ElementBox",
    "AttemptRecord",
    "DistributionResult",
]
