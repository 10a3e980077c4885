"""Gradio page for looking up Pokemon profiles."""

from __future__ import annotations

import argparse
from typing import Iterator, Optional, Tuple

import gradio as gr

from . import config
from .logging_config import setup_logging
from .session import ProfileSession
from .view import render_state

EXAMPLE_QUERIES = ("bulbasaur", "25", "Eevee", "charizard")


def _search_handler(
    query: str, session: Optional[ProfileSession]
) -> Iterator[Tuple[str, ProfileSession]]:
    """Run a lookup for one browser session, yielding the loading line and then the outcome."""
    session = session or ProfileSession()
    request_id = session.begin(query)
    yield render_state(session.state), session
    state = session.complete(request_id, query)
    yield render_state(state), session


def build_demo() -> gr.Blocks:
    """Assemble the search page; each browser session gets its own ProfileSession."""
    with gr.Blocks(title="DexProfile") as demo:
        gr.Markdown("# Pokédex\nSearch by Pokemon name or national dex number.")
        session_state = gr.State(ProfileSession())
        with gr.Row():
            query_input = gr.Textbox(
                label="Pokemon",
                placeholder="Enter Pokemon name or number",
                scale=4,
            )
            search_button = gr.Button("Search", variant="primary", scale=1)
        output = gr.HTML()
        gr.Examples(examples=[[query] for query in EXAMPLE_QUERIES], inputs=[query_input])

        search_button.click(
            _search_handler,
            inputs=[query_input, session_state],
            outputs=[output, session_state],
        )
        query_input.submit(
            _search_handler,
            inputs=[query_input, session_state],
            outputs=[output, session_state],
        )
    return demo


def main() -> None:
    """Parse server flags, configure logging, and launch the page."""
    parser = argparse.ArgumentParser(description="Run the DexProfile Gradio page.")
    parser.add_argument("--host", default=config.settings.host, help="Host for the Gradio server.")
    parser.add_argument(
        "--port", type=int, default=config.settings.port, help="Port for the Gradio server."
    )
    parser.add_argument("--share", action="store_true", help="Share the Gradio app publicly.")
    args = parser.parse_args()

    setup_logging()
    demo = build_demo()
    demo.queue().launch(server_name=args.host, server_port=args.port, share=args.share)


if __name__ == "__main__":
    main()
