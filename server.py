# server.py
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from transposition import InvalidInput, EmptyKey, encode, decode
import settings
from settings import MAX_PAYLOAD, CORS_ORIGINS

print(f"Transposition API: payload limit {MAX_PAYLOAD} chars.")

app = FastAPI(title="Transposition", version="1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS, allow_credentials=True, allow_methods=["*"], allow_headers=["*"],
)

# --- Schemas ---
class EncodeReq(BaseModel):
    text: str = Field(..., description="plaintext; spaces become '_'")
    key: str = Field(..., description="keyword, at least one character")

class DecodeReq(BaseModel):
    ciphertext: str
    key: str = Field(..., description="keyword, at least one character")

class RankedChar(BaseModel):
    char: str
    index: int

class EncodeResp(BaseModel):
    ciphertext: str
    rows: int
    cols: int
    grid: list[str]
    ranked_key: list[RankedChar]

class DecodeResp(BaseModel):
    plaintext: str
    rows: int
    cols: int
    grid: list[str]
    ranked_key: list[RankedChar]
    warning: Optional[str] = None

# --- Helpers ---
def _check_size(*payloads: str):
    if any(len(p) > MAX_PAYLOAD for p in payloads):
        raise HTTPException(413, f"payload longer than {MAX_PAYLOAD} chars")

def _ranked(result) -> list[RankedChar]:
    return [RankedChar(char=ch, index=idx) for ch, idx in result.ranked_key]

# --- Routes ---
@app.get("/health")
def health():
    return {"ok": True}

@app.post("/api/encode", response_model=EncodeResp)
def encode_text(body: EncodeReq):
    _check_size(body.text, body.key)
    try:
        res = encode(body.text, body.key)
    except (InvalidInput, EmptyKey) as e:
        raise HTTPException(400, str(e))
    return EncodeResp(ciphertext=res.ciphertext, rows=res.grid.rows, cols=res.grid.cols,
                      grid=res.grid.row_strings(), ranked_key=_ranked(res))

@app.post("/api/decode", response_model=DecodeResp)
def decode_text(body: DecodeReq):
    _check_size(body.ciphertext, body.key)
    try:
        res = decode(body.ciphertext, body.key)
    except (InvalidInput, EmptyKey) as e:
        raise HTTPException(400, str(e))
    return DecodeResp(plaintext=res.plaintext, rows=res.grid.rows, cols=res.grid.cols,
                      grid=res.grid.row_strings(), ranked_key=_ranked(res),
                      warning=str(res.warning) if res.warning else None)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
