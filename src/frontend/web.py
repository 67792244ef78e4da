from __future__ import annotations
import argparse
import logging
from html import escape
from flask import Flask, request, jsonify, Response, abort
from backend import config as CFG
from backend.engine import Engine
from backend.buffer import TextBuffer

app = Flask(__name__)
_engine: Engine | None = None

log = logging.getLogger(__name__)

def _eng() -> Engine:
    if _engine is None or not _engine.started:
        abort(503, description="engine not started")
    return _engine  # type: ignore

def _buffer_or_404(sid: str) -> TextBuffer:
    try:
        return _eng().buffer(sid)
    except KeyError:
        abort(404, description=f"unknown session: {sid}")

def _state(sid: str, buf: TextBuffer) -> dict:
    return {"id": sid, **buf.snapshot().to_dict()}

@app.errorhandler(404)
@app.errorhandler(400)
@app.errorhandler(503)
def _json_error(err):
    return jsonify({"ok": False, "error": err.description}), err.code

# ---------- API ----------
@app.get("/api/health")
def api_health():
    eng = _eng()
    return jsonify({"ok": True, "sessions": len(eng.sessions())})

@app.post("/api/sessions")
def api_open_session():
    eng = _eng()
    sid = eng.open_session()
    return jsonify(_state(sid, eng.buffer(sid))), 201

@app.get("/api/sessions/<sid>")
def api_session_state(sid: str):
    return jsonify(_state(sid, _buffer_or_404(sid)))

@app.post("/api/sessions/<sid>/command")
def api_command(sid: str):
    _buffer_or_404(sid)
    payload = request.get_json(silent=True) or {}
    line = payload.get("command")
    if not isinstance(line, str):
        abort(400, description='expected JSON body {"command": "<line>"}')

    res = _eng().execute(sid, line)
    if res is None:
        return jsonify({"ok": True, "quit": False, "message": None, **_state(sid, _eng().buffer(sid))})
    body = {"id": sid, **res.to_dict()}
    if res.quit:
        _eng().close_session(sid)
    return jsonify(body), (200 if res.ok else 400)

@app.delete("/api/sessions/<sid>")
def api_close_session(sid: str):
    _buffer_or_404(sid)
    _eng().close_session(sid)
    return jsonify({"ok": True, "id": sid})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Line Editor • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --danger:#ff5d5d;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:860px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
.line{
  font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace;
  padding:14px; border:1px solid var(--border); border-radius:12px; background:#0b1117;
  white-space:pre; min-height:3em;
}
.cursor{ color:var(--accent); font-weight:700 }
.controls{ display:flex; gap:10px; margin:12px 0; flex-wrap:wrap }
.controls input{
  flex:1; min-width:220px; padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:15px; outline:none;
}
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer }
.meta{ color:var(--muted); font-size:13px }
.err{ color:var(--danger); min-height:1.4em; margin-top:8px }
pre.help{ color:var(--muted); font-size:13px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Line Editor</h1>
      <div id="line" class="line"></div>
      <div class="controls">
        <input id="cmd" type="text" placeholder="i x · d · l · r · s pattern replacement · q" autocomplete="off" autofocus />
        <button class="btn" data-cmd="l">&larr;</button>
        <button class="btn" data-cmd="r">&rarr;</button>
        <button class="btn" data-cmd="d">Del</button>
      </div>
      <div id="meta" class="meta">Connecting…</div>
      <div id="err" class="err"></div>
      <pre class="help">HELP_TEXT</pre>
    </div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
let sid = null;

function esc(s){ return s.replace(/[&<>]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;"}[c])); }
function render(st){
  const t = st.text, p = st.cursor_position;
  $("#line").innerHTML = esc(t.slice(0,p)) + '<span class="cursor">|</span>' + esc(t.slice(p));
  $("#meta").textContent = `Session ${st.id ?? sid} • Cursor Position: ${p}`;
}
async function openSession(){
  const r = await fetch("/api/sessions", {method:"POST"});
  const st = await r.json(); sid = st.id; render(st);
}
async function send(line){
  const r = await fetch(`/api/sessions/${sid}/command`, {
    method:"POST", headers:{"Content-Type":"application/json"}, body: JSON.stringify({command: line})
  });
  const st = await r.json();
  $("#err").textContent = st.ok ? "" : (st.message ?? st.error ?? "error");
  if(st.quit){ $("#meta").textContent = "Session closed. Reload to start again."; sid = null; return; }
  if(st.text !== undefined) render(st);
}
$("#cmd").addEventListener("keydown", (ev)=>{
  if(ev.key === "Enter" && sid){ send(ev.target.value); ev.target.value = ""; }
});
document.querySelectorAll("button[data-cmd]").forEach(b =>
  b.addEventListener("click", ()=>{ if(sid) send(b.dataset.cmd); }));
openSession();
</script>
</body>
</html>
""".replace("HELP_TEXT", escape("\n".join(CFG.HELP_LINES)))
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--db", dest="db", default=None)  # DSN: "memory://"
    ap.add_argument("--host", default=CFG.WEB_HOST)
    ap.add_argument("--port", type=int, default=CFG.WEB_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.start(db_dsn=args.db, verbose=args.verbose)
    log.info("Serving on http://%s:%d", args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
