"""
API FastAPI do interpretador de comandos de voz do catálogo
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from typing import Optional
from loguru import logger

from ..interpreter import VoiceCommandInterpreter
from ..services.catalog_vocabulary import get_vocabulary_service
from ..services.command_history import CommandHistory, COMMAND_TYPE_MAP


app = FastAPI(
    title="Catálogo - Comandos de Voz",
    description="Interpreta frases faladas/digitadas em filtros, ordenação e busca do catálogo",
    version="1.0.0"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Singletons
interpreter: Optional[VoiceCommandInterpreter] = None  # Inicializado sob demanda
command_history = CommandHistory()


def get_interpreter() -> VoiceCommandInterpreter:
    """Cria o interpretador com o vocabulário carregado (uma vez)"""
    global interpreter
    if interpreter is None:
        vocabulary = get_vocabulary_service().vocabulary
        interpreter = VoiceCommandInterpreter(vocabulary)
        logger.info(f"🧠 Interpretador inicializado: {vocabulary.summary()}")
    return interpreter


# ==================== Models ====================

class InterpretRequest(BaseModel):
    """Frase vinda do overlay de voz ou do campo de busca"""
    transcript: str
    record_history: bool = True


# ==================== Endpoints ====================

@app.get("/")
async def root():
    """Health check"""
    return {
        "status": "online",
        "service": "catalog-voice",
        "version": "1.0.0"
    }


@app.post("/voice/interpret")
async def interpret(data: InterpretRequest):
    """
    Interpreta uma frase e devolve o comando para o painel de filtros.

    Returns:
        Comando no formato do despachante (type, action, filterKey,
        value, sortValue, filters)
    """
    try:
        command = get_interpreter().parse(data.transcript)

        if data.record_history and data.transcript.strip():
            command_history.add_command(
                data.transcript,
                command_type=COMMAND_TYPE_MAP[command.type],
                successful=True,
            )

        return command.to_payload()

    except Exception as e:
        logger.error(f"❌ Erro ao interpretar comando: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/voice/vocabulary")
async def vocabulary_summary():
    """Quantidade de entradas do vocabulário carregado"""
    try:
        return get_interpreter().vocabulary.summary()
    except Exception as e:
        logger.error(f"❌ Erro ao obter vocabulário: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/voice/history")
async def history():
    """Histórico completo e os comandos recentes distintos"""
    return {
        "history": [r.model_dump(mode="json", by_alias=True) for r in command_history.history],
        "recent": [r.model_dump(mode="json", by_alias=True) for r in command_history.recent_commands()],
    }


@app.get("/voice/history/frequent")
async def frequent_commands():
    return [p.model_dump(mode="json", by_alias=True) for p in command_history.frequent_commands()]


@app.get("/voice/suggestions")
async def suggestions(partial: Optional[str] = None):
    """Sugestões de comandos para autocompletar"""
    return [p.model_dump(mode="json", by_alias=True) for p in command_history.get_suggestions(partial)]


@app.delete("/voice/history")
async def clear_history():
    command_history.clear_history()
    return {"success": True}


@app.delete("/voice/history/{record_id}")
async def remove_history_record(record_id: str):
    if not command_history.remove_command(record_id):
        raise HTTPException(status_code=404, detail="Comando não encontrado no histórico")
    return {"success": True}


# ==================== Startup/Shutdown ====================

@app.on_event("startup")
async def startup_event():
    """Inicialização da aplicação"""
    logger.info("🚀 Iniciando API de comandos de voz...")
    try:
        get_interpreter()
    except Exception as e:
        logger.error(f"❌ Erro ao inicializar interpretador: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    """Finalização da aplicação"""
    logger.info("👋 Encerrando API de comandos de voz...")
