import logging
from typing import Optional

from flask import Flask, render_template_string

from wheelprimes.api import primes_bp
from wheelprimes.config import Settings, get_settings

PAGE = """<!doctype html><html><head>
<meta charset="utf-8"><meta name="viewport" content="width=device-width,initial-scale=1">
<title>wheelprimes</title>
<style>
body{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,Helvetica,Arial,sans-serif;margin:0;background:#fafafa;color:#111}
.wrap{max-width:860px;margin:40px auto;padding:0 16px}
.card{background:#fff;border:1px solid #eee;border-radius:12px;padding:16px;margin:18px 0}
input,button{font-size:14px;padding:10px;border-radius:8px;border:1px solid #d0d0d0}
input{width:100%;box-sizing:border-box}button{background:#111;color:#fff;cursor:pointer}
.grid{display:grid;grid-template-columns:1fr auto;gap:10px}.mono{font-family:ui-monospace,Menlo,Consolas,monospace}
pre{white-space:pre-wrap;word-break:break-all;background:#f6f6f6;border:1px solid #eee;border-radius:8px;padding:10px}
.note{color:#555;font-size:12px}
</style></head><body><div class="wrap">
<h1>wheelprimes</h1>
<div class="note">Cached trial division over a mod-30 wheel. Inputs up to {{ max_n }}.</div>

<div class="card"><h3>Factorize</h3>
  <div class="grid"><input id="f_n" class="mono" placeholder="n"/><button id="f_go">Factor</button></div>
  <pre id="f_out">–</pre></div>

<div class="card"><h3>Is prime?</h3>
  <div class="grid"><input id="p_n" class="mono" placeholder="n"/><button id="p_go">Check</button></div>
  <pre id="p_out">–</pre></div>

<div class="card"><h3>n-th prime (zero-based)</h3>
  <div class="grid"><input id="k_k" class="mono" placeholder="k"/><button id="k_go">Look up</button></div>
  <pre id="k_out">–</pre></div>
</div>
<script>
async function get(url){const r=await fetch(url);return await r.json();}
function wire(btn,inp,out,url,fmt){document.querySelector(btn).onclick=async()=>{const v=(document.querySelector(inp).value||'').trim();const o=document.querySelector(out);o.textContent='…';try{const res=await get(url+encodeURIComponent(v));o.textContent=res.error?('Error: '+res.error):fmt(res);}catch(e){o.textContent='Error: '+e;}};}
wire('#f_go','#f_n','#f_out','/api/factorize?n=',r=>r.pretty);
wire('#p_go','#p_n','#p_out','/api/is_prime?n=',r=>r.n+(r.is_prime?' is prime':' is not prime'));
wire('#k_go','#k_k','#k_out','/api/nth_prime?k=',r=>'prime #'+r.k+' = '+r.prime);
</script></body></html>"""


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or get_settings()
    app = Flask(__name__)
    app.config["WHEELPRIMES_SETTINGS"] = settings
    app.register_blueprint(primes_bp)

    @app.get("/")
    def home():
        return render_template_string(PAGE, max_n=settings.max_n)

    return app


if __name__ == "__main__":
    cfg = get_settings()
    logging.basicConfig(level=cfg.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    create_app(cfg).run(cfg.host, cfg.port, debug=True)
