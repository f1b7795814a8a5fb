from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse
import json

from prettyscatter.api.debounce import Debouncer
from prettyscatter.api.scatter_facade import ScatterBackend
from prettyscatter.config import ScatterConfig
from prettyscatter.io_utils.loader import box_from_dict, rect_from_dict, scene_from_dict

# Inicializa a fachada com a configuração padrão
backend = ScatterBackend(ScatterConfig())

# configuração do FastAPI
app = FastAPI()


def _parse_count(value) -> int:
    """Aceita apenas quantidades inteiras (7 ou 7.0), sem truncar frações."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"target_count deve ser um número inteiro: {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"target_count deve ser um número inteiro: {value!r}")
    return int(value)


def _parse_flag(value) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"normalize deve ser true ou false: {value!r}")
    return value


@app.post("/distribution")
async def compute_distribution(data: dict):
    """Calcula uma distribuição de pontos a partir de valores numéricos."""
    try:
        zones = [rect_from_dict(z) for z in data.get("exclusion_zones", [])]
        result = backend.compute_distribution(
            width=float(data["width"]),
            height=float(data["height"]),
            point_radius=float(data["point_radius"]),
            target_count=_parse_count(data["target_count"]),
            exclusion_zones=zones,
            normalize=_parse_flag(data.get("normalize", True)),
        )
    except KeyError as e:
        return JSONResponse({"error": f"Campo obrigatório ausente: {e}"}, status_code=400)
    except (TypeError, ValueError) as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    return JSONResponse(result)


@app.post("/layout")
async def compute_layout(data: dict):
    """Executa uma passagem de layout para a cena enviada."""
    try:
        scene = scene_from_dict(data)
        plan = backend.plan_layout(scene)
    except KeyError as e:
        return JSONResponse({"error": f"Campo obrigatório ausente: {e}"}, status_code=400)
    except (TypeError, ValueError) as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    return JSONResponse(plan)


@app.post("/layout/resize")
async def resize_layout(data: dict):
    """Refaz o último layout com a nova largura de janela e/ou contêiner."""
    try:
        container = None
        if "container" in data:
            container = box_from_dict(data["container"])
        viewport_width = data.get("viewport_width")
        plan = backend.relayout(
            viewport_width=None if viewport_width is None else float(viewport_width),
            container=container,
        )
    except RuntimeError as e:
        return JSONResponse({"error": str(e)}, status_code=409)
    except KeyError as e:
        return JSONResponse({"error": f"Campo obrigatório ausente: {e}"}, status_code=400)
    except (TypeError, ValueError) as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    return JSONResponse(plan)


# rota para o WebSocket de redimensionamento
@app.websocket("/layout/stream")
async def layout_stream(ws: WebSocket):
    """
    Recebe cenas a cada evento de redimensionamento e responde apenas à
    última de cada rajada, após `event_response_delay` segundos.
    """
    await ws.accept()
    # A fachada é compartilhada por todas as conexões e não suporta
    # chamadas simultâneas; o stream assume um cliente por vez.
    debouncer = Debouncer(
        backend.config.event_response_delay,
        on_error=lambda exc: backend.log(
            f"Falha ao responder ao evento de redimensionamento: {exc!r}"
        ),
    )

    async def send_plan(data: dict) -> None:
        try:
            plan = backend.plan_layout(scene_from_dict(data))
        except (KeyError, TypeError, ValueError) as e:
            await ws.send_json({"error": str(e), "request_id": data.get("request_id")})
            return
        plan["request_id"] = data.get("request_id")
        await ws.send_json(plan)

    try:
        while True:
            try:
                data = json.loads(await ws.receive_text())
                if not isinstance(data, dict):
                    raise ValueError("cena deve ser um objeto JSON")
            except ValueError:
                await ws.send_json({"error": "Mensagem JSON inválida"})
                continue
            debouncer.schedule(lambda data=data: send_plan(data))

    except WebSocketDisconnect:
        print("Stream de layout encerrado: WebSocket desconectado.")
    finally:
        debouncer.cancel()
