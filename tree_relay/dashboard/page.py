from __future__ import annotations


HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset='utf-8'>
<title>Live Directory Tree Server</title>
<style>
body{font-family:system-ui,-apple-system,'Segoe UI',Roboto,sans-serif;background:#1e1e1e;color:#d4d4d4;padding:20px;margin:0}
h1{color:#569cd6}
a{color:#569cd6}
.status{padding:10px 15px;border-radius:6px;margin:10px 0;display:inline-block}
.connected{background:#2d5a2d;color:#90ee90}
.disconnected{background:#5a2d2d;color:#ff9090}
pre{background:#2d2d2d;padding:15px;border-radius:6px;overflow:auto;max-height:70vh;font-family:Consolas,Monaco,monospace;font-size:12px;line-height:1.4}
.info{color:#888;font-size:14px}
button{background:#0e639c;color:#fff;border:none;padding:8px 16px;border-radius:4px;cursor:pointer;margin-right:10px}
button:hover{background:#1177bb}
</style>
</head>
<body>
<h1>Live Directory Tree Server</h1>
<div id='status' class='status disconnected'>Checking...</div>
<p class='info'>Port: __PORT__ | <a href='/tree'>JSON</a> | <a href='/tree/text'>Plain Text</a></p>
<button onclick='refresh()'>Refresh</button>
<button onclick='copyTree()'>Copy Tree</button>
<h3>Current Tree:</h3>
<pre id='tree'>Loading...</pre>
<script>
async function refresh(){
  const el=document.getElementById('status');
  try{
    const s=await (await fetch('/status',{cache:'no-store'})).json();
    if(s.connected){el.className='status connected';el.textContent='Connected - '+s.gameName;}
    else{el.className='status disconnected';el.textContent='Waiting for Roblox Studio...';}
    const t=await (await fetch('/tree/text',{cache:'no-store'})).text();
    document.getElementById('tree').textContent=t;
  }catch(e){el.textContent='Error: '+e.message;}
}
async function copyTree(){
  await navigator.clipboard.writeText(document.getElementById('tree').textContent);
  alert('Copied to clipboard!');
}
refresh();setInterval(refresh,3000);
</script>
</body>
</html>"""


def render_debug_page(port: int | str) -> str:
    return HTML.replace("__PORT__", str(port))
