# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from typewriter.logging_setup import setup_logging

setup_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Typewriter Messenger", page_icon="✉️", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("✉️ Typewriter Messenger")
st.write(
    "Escribe un mensaje, se cifra aquí con AES-256-GCM y solo el texto cifrado "
    "viaja al almacén. La clave va dentro del enlace que compartes."
)
st.info("Ve a **Redactar Mensaje** para crear un enlace o a **Ver Mensaje** para abrir uno.")
