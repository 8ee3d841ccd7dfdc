import logging

from overseerr_signal.controller import create_app
from overseerr_signal.constants import Settings


settings = Settings.from_env()
logging.basicConfig(
    level=logging.DEBUG if settings.debug_mode else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
)
app = create_app(settings)

if __name__ == '__main__':
    logging.getLogger(__name__).info("Proxy Overseerr -> Signal rodando na porta %s", settings.port)
    # use_reloader=False evita subir o app duas vezes com DEBUG_MODE ativo
    app.run(host='0.0.0.0', port=settings.port, debug=settings.debug_mode, use_reloader=False)
