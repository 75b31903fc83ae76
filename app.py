import os
from flask import Flask, render_template_string

from primecheck import BASES_U32, BASES_U64
from primecheck.api import prime_bp

HOST  = os.getenv("PRIMECHECK_HOST", "127.0.0.1")
PORT  = int(os.getenv("PRIMECHECK_PORT", "8082"))
DEBUG = os.getenv("PRIMECHECK_DEBUG", "0") == "1"

app = Flask(__name__)
app.register_blueprint(prime_bp)

PAGE = """<!doctype html><html><head>
<meta charset="utf-8"><meta name="viewport" content="width=device-width,initial-scale=1">
<title>primecheck</title>
<style>
body{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Cantarell,Noto Sans,Helvetica,Arial,sans-serif;margin:0;background:#fafafa;color:#111}
.wrap{max-width:860px;margin:40px auto;padding:0 16px}
h1{font-weight:700}.card{background:#fff;border:1px solid #eee;border-radius:12px;padding:16px 16px;margin:18px 0;box-shadow:0 1px 2px rgba(0,0,0,.03)}
label{font-size:12px;color:#555}input,select,button{font-size:14px;padding:10px;border-radius:8px;border:1px solid #d0d0d0}
input{width:100%;box-sizing:border-box}button{background:#111;color:#fff;cursor:pointer}button:hover{opacity:.92}
.grid{display:grid;grid-template-columns:2fr 1fr 1fr;gap:10px}.mono{font-family:ui-monospace,Menlo,Consolas,monospace}
pre{white-space:pre-wrap;word-break:break-all;background:#f6f6f6;border:1px solid #eee;border-radius:8px;padding:10px}
.note{color:#555;font-size:12px}
</style></head><body><div class="wrap">
<h1>primecheck</h1>

<div class="card">
  <h3>Is it prime?</h3>
  <div class="grid">
    <div><label>n (integer &ge; 2)</label><input id="p_n" class="mono" placeholder="enter integer"/></div>
    <div><label>Word size</label><select id="p_bits"><option value="32">32-bit</option><option value="64">64-bit</option></select></div>
    <div style="display:flex;align-items:flex-end"><button id="p_go">Check</button></div>
  </div>
  <div class="note">Deterministic Miller&ndash;Rabin. 32-bit bases: {{ bases32 }}. 64-bit bases: {{ bases64 }}.</div>
  <pre id="p_out">&ndash;</pre>
</div>
</div>
<script>
async function post(url,p){const r=await fetch(url,{method:'POST',headers:{'Content-Type':'application/json'},body:JSON.stringify(p)});return await r.json();}
document.querySelector('#p_go').onclick=async()=>{const n=(document.querySelector('#p_n').value||'').trim();const bits=parseInt(document.querySelector('#p_bits').value,10);const out=document.querySelector('#p_out');out.textContent='Checking…';try{const res=await post('/api/is_prime',{n,bits});out.textContent=res.error?('Error: '+res.error):(res.n+' is '+res.class);}catch(e){out.textContent='Error: '+e;}};
</script></body></html>"""

@app.get("/")
def home():
    return render_template_string(PAGE,
                                  bases32=", ".join(map(str, BASES_U32)),
                                  bases64=", ".join(map(str, BASES_U64)))

if __name__ == "__main__":
    app.run(HOST, PORT, debug=DEBUG)
