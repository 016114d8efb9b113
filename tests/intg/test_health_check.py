"""Health check against a fully provisioned instance."""


async def test_health_check_works(test_app):
    response = await test_app.get_health_check()

    assert response.is_success
    assert response.headers["content-length"] == "0"


async def test_port_is_ephemeral(test_app):
    assert test_app.port != 0
    assert test_app.address.endswith(f":{test_app.port}")
