# --------------------------------------------------------------
# File: 2_Ver_Mensaje.py
# Description: Abre un enlace compartido, descifra y muestra el mensaje.
# --------------------------------------------------------------

import time

import streamlit as st

from api.blobstore import BlobStoreClient
from api.services import open_message, user_message
from typewriter.config import TYPING_DELAY_MS
from typewriter.links import parse_link
from typewriter.logging_setup import setup_logging
from typewriter.typing_chain import TypingChainRegistry, split_paragraphs

setup_logging()


def _type_out(placeholder, paragraph: str) -> None:
    """Escribe el párrafo carácter a carácter en el contenedor indicado."""

    delay = TYPING_DELAY_MS / 1000.0
    for end in range(1, len(paragraph) + 1):
        placeholder.text(paragraph[:end] + "▌")
        time.sleep(delay)
    placeholder.text(paragraph)


# Presenta el título de la sección de lectura.
st.title("📬 Ver mensaje")

chains = st.session_state.setdefault("typing_chains", TypingChainRegistry())

url = st.text_input("Pega aquí el enlace recibido:", placeholder="https://...#/view?id=...&key=...")

if st.button("Abrir mensaje", disabled=not url):
    with st.spinner("Descargando y descifrando..."):
        try:
            with BlobStoreClient() as client:
                message = open_message(url, client)
        except Exception as exc:
            st.session_state.pop("opened", None)
            st.error(user_message(exc))
        else:
            message_id = parse_link(url).blob_id
            paragraphs = split_paragraphs(message)
            chains.reset(message_id)
            chains.start(message_id, len(paragraphs))
            st.session_state["opened"] = {"id": message_id, "paragraphs": paragraphs}

opened = st.session_state.get("opened")
if opened:
    message_id = opened["id"]
    paragraphs = opened["paragraphs"]

    # Muestra lo ya escrito y teclea el párrafo activo hasta completar la cadena.
    for index, paragraph in enumerate(paragraphs):
        if chains.state(message_id).is_revealed(index):
            st.text(paragraph)
            continue
        state = chains.state(message_id)
        if state.is_active and state.index == index:
            _type_out(st.empty(), paragraph)
            chains.advance(message_id)
