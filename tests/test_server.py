import logging
import socket

import pytest

from carcinusdb.server import TcpServer, start


@pytest.mark.asyncio
async def test_run_binds_requested_host():
    host, port = await TcpServer("127.0.0.1", 0).run()
    assert host == "127.0.0.1"
    assert 0 < port < 65536


@pytest.mark.asyncio
async def test_run_logs_address(caplog):
    caplog.set_level(logging.INFO, logger="carcinusdb.server")
    host, port = await TcpServer("127.0.0.1", 0).run()
    assert f"Listening on {host}:{port}" in caplog.text


@pytest.mark.asyncio
async def test_start_returns_bound_address():
    host, port = await start("127.0.0.1", 0)
    assert host == "127.0.0.1"
    assert port > 0


@pytest.mark.asyncio
async def test_run_fails_on_port_in_use():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        sock.listen()
        taken = sock.getsockname()[1]
        with pytest.raises(OSError):
            await TcpServer("127.0.0.1", taken).run()


@pytest.mark.asyncio
async def test_port_is_free_after_run():
    _, port = await TcpServer("127.0.0.1", 0).run()
    again = await TcpServer("127.0.0.1", port).run()
    assert again == ("127.0.0.1", port)