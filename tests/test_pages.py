# --------------------------------------------------------------
# File: test_pages.py
# Description: Pruebas de las páginas Streamlit ante errores inesperados.
# --------------------------------------------------------------

from pathlib import Path

from streamlit.testing.v1 import AppTest

from api import services

PAGES_DIR = Path(__file__).resolve().parent.parent / "app_streamlit" / "pages"


def _boom(*args, **kwargs):
    raise RuntimeError("fallo interno")


def test_compose_page_shows_unexpected_error(monkeypatch):
    """Comprueba que un error ajeno a la aplicación llegue a la interfaz como texto genérico.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para sustituir el flujo de creación.

    Returns:
        None: Las aserciones revisan el mensaje de error mostrado.
    """
    monkeypatch.setattr(services, "create_message", _boom)
    at = AppTest.from_file(str(PAGES_DIR / "1_Redactar_Mensaje.py"), default_timeout=30)
    at.run()
    at.button[0].click().run()

    assert not at.exception
    assert [e.value for e in at.error] == [services.MSG_UNEXPECTED]


def test_view_page_shows_unexpected_error(monkeypatch):
    """Verifica que la página de lectura tampoco deje escapar excepciones inesperadas.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para sustituir el flujo de lectura.

    Returns:
        None: Las aserciones revisan el mensaje de error mostrado.
    """
    monkeypatch.setattr(services, "open_message", _boom)
    at = AppTest.from_file(str(PAGES_DIR / "2_Ver_Mensaje.py"), default_timeout=30)
    at.run()
    at.text_input[0].input("https://x/#/view?id=abc123&key=k").run()
    at.button[0].click().run()

    assert not at.exception
    assert [e.value for e in at.error] == [services.MSG_UNEXPECTED]
