# --------------------------------------------------------------
# File: 1_Redactar_Mensaje.py
# Description: Redacta un mensaje, lo cifra en local y genera el enlace.
# --------------------------------------------------------------

import streamlit as st

from api.blobstore import BlobStoreClient
from api.services import create_message, user_message
from typewriter.logging_setup import setup_logging

setup_logging()

DEFAULT_TEXT = "Dear friend,\n\nThis is a test message.\n\nSincerely,\nA Coder"

# Presenta el título de la sección de redacción.
st.title("📝 Redactar mensaje")

text = st.text_area(
    "Escribe tu mensaje:",
    value=DEFAULT_TEXT,
    height=220,
    placeholder="Escribe aquí tu mensaje...",
)

if st.button("Crear enlace para compartir"):
    st.session_state.pop("share_link", None)
    with st.spinner("Creando enlace..."):
        try:
            with BlobStoreClient() as client:
                shared = create_message(text, client)
        except Exception as exc:
            st.error(user_message(exc))
        else:
            st.session_state["share_link"] = shared.link

# Muestra el enlace generado; la clave solo existe dentro de él.
link = st.session_state.get("share_link")
if link:
    st.success("Enlace creado. Cualquiera que lo tenga podrá leer el mensaje.")
    st.code(link, language="text")
    st.caption("Usa el icono de copiar del recuadro para llevarte el enlace.")
