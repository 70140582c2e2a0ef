from modules.auth.interfaces import IAuthService
from modules.auth.models import VerifierConfig
from modules.auth.service import AuthService


class TestAuthInterface:
    def test_service_implements_interface(self):
        """AuthService should satisfy the IAuthService protocol."""
        service = AuthService(VerifierConfig(jwt_secret="secret"))
        assert isinstance(service, IAuthService)

    def test_interface_methods_exist(self):
        assert hasattr(IAuthService, "validate_token")
        assert callable(getattr(AuthService, "validate_token"))
