# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-12-28
# Updated: 2026-10-19
# Description: gradio_app.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import os
from typing import Any, Dict, List

import gradio as gr

import settings
from client.RepeatedQueryAggregator import RepeatedQueryAggregator


# Log tailing for UI
def tail_log_file(path: str, n_lines: int = 200) -> str:
    """
    Tail last n_lines from a local log file path.
    (UI reads the file directly, no log API needed.)
    """
    try:
        if not path or not os.path.exists(path):
            return f"(log file not found: {path})"
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.readlines()
        return "".join(lines[-int(n_lines):])
    except OSError as e:
        return f"(failed to read log file: {e})"


# Chat UI functions
def ui_chat(message: str, history: List[Dict[str, Any]], api_base_url: str = settings.API_BASE_URL):
    message = (message or "").strip()
    if not message:
        return history, ""

    # Gradio "messages" history is already a list of {"role", "content"} dicts
    transcript = [
        {"role": m["role"], "content": m["content"]}
        for m in (history or [])
        if isinstance(m, dict) and "role" in m and "content" in m
    ]

    aggregator = RepeatedQueryAggregator(base_url=api_base_url, repeat_count=settings.REPEAT_COUNT)
    return aggregator.run_turn(message, transcript), ""


# Build Gradio UI
def build_gradio_app(api_base_url: str = settings.API_BASE_URL) -> gr.Blocks:
    api_base_url = api_base_url.rstrip("/")

    def send(message: str, history: List[Dict[str, Any]]):
        return ui_chat(message, history, api_base_url=api_base_url)

    with gr.Blocks(title="CASELIST UI", analytics_enabled=False) as demo:
        gr.Markdown(
            f""" # CASELIST (list -> embed -> store) **API:** `{api_base_url}`  **Calls per message:** `{settings.REPEAT_COUNT}`  **Log file:** `{settings.LOG_FILE}`""")

        with gr.Tab("Chat"):
            chatbot = gr.Chatbot(label="Chat", height=420, type="messages")
            message = gr.Textbox(label="Message", placeholder="Describe the legal issue…")
            send_btn = gr.Button("Send")

            send_btn.click(fn=send, inputs=[message, chatbot], outputs=[chatbot, message])
            message.submit(fn=send, inputs=[message, chatbot], outputs=[chatbot, message])

        with gr.Tab("Logs"):
            with gr.Row():
                log_path = gr.Textbox(label="Log file path", value=settings.LOG_FILE)
                tail_lines = gr.Slider(50, 2000, value=settings.LOG_TAIL_LINES, step=50, label="Tail lines")
                refresh_logs_btn = gr.Button("Refresh logs")
            log_view = gr.Textbox(label="Logs", value="", lines=25, interactive=False)

            refresh_logs_btn.click(fn=tail_log_file, inputs=[log_path, tail_lines], outputs=[log_view])

    return demo


if __name__ == "__main__":
    import threading
    import uvicorn

    API_HOST = os.getenv("CASELIST_API_HOST", "127.0.0.1")
    API_PORT = int(os.getenv("CASELIST_API_PORT", "8000"))

    UI_HOST = os.getenv("CASELIST_UI_HOST", "127.0.0.1")
    UI_PORT = int(os.getenv("CASELIST_UI_PORT", "7860"))

    def run_api() -> None:
        uvicorn.run(
            "api.main:app",
            host=API_HOST,
            port=API_PORT,
            log_level="info",
            reload=False,
        )

    api_thread = threading.Thread(target=run_api, daemon=True)
    api_thread.start()

    demo = build_gradio_app(api_base_url=f"http://{API_HOST}:{API_PORT}")
    demo.launch(server_name=UI_HOST, server_port=UI_PORT)
