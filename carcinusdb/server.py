"""TCP front end of the database."""

import asyncio
import logging

logger = logging.getLogger(__name__)


async def start(hostname, port):
    """Create a server for ``hostname``:``port`` and run it."""
    server = TcpServer(hostname, port)
    return await server.run()


async def _close_connection(reader, writer):
    writer.close()


class TcpServer:
    """Listens for clients on a host and port."""

    def __init__(self, hostname, port):
        self.hostname = hostname
        self.port = port

    async def run(self):
        """Bind the listening socket, log its address and return that address."""
        server = await asyncio.start_server(
            _close_connection, self.hostname, self.port
        )
        try:
            address = server.sockets[0].getsockname()[:2]
            logger.info("Listening on %s:%s", address[0], address[1])
        finally:
            server.close()
            await server.wait_closed()
        return address

    def __repr__(self):
        return f"TcpServer(hostname={self.hostname!r}, port={self.port})"