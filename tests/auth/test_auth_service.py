import pytest

from hr_payroll.auth.credentials import HashedVerifier, PlaintextVerifier, build_verifier
from hr_payroll.auth.service import AuthService
from hr_payroll.core.enums import Role
from hr_payroll.core.exceptions import AuthenticationError, AuthorizationError, ValidationError


@pytest.fixture
def auth(employees_repo):
    return AuthService(employees_repo, PlaintextVerifier())


def test_authenticate_ok(auth, worker):
    assert auth.authenticate("alice", "pw-alice").employee_id == worker.employee_id


def test_unknown_user_and_wrong_password_fail_alike(auth, worker):
    with pytest.raises(AuthenticationError) as unknown:
        auth.authenticate("nobody", "pw-alice")
    with pytest.raises(AuthenticationError) as wrong:
        auth.authenticate("alice", "nope")

    assert str(unknown.value) == str(wrong.value)


def test_authenticate_requires_both_values(auth):
    with pytest.raises(ValidationError):
        auth.authenticate("alice", "")


def test_login_with_wrong_role_looks_like_bad_credentials(auth, worker):
    with pytest.raises(AuthenticationError) as exc:
        auth.login("alice", "pw-alice", role=Role.ADMIN)

    assert str(exc.value) == "Invalid credentials"


def test_login_admin(auth, admin):
    assert auth.login("admin", "admin123", role=Role.ADMIN).is_admin


def test_resolve_identity(auth, worker):
    assert auth.resolve_identity(" alice ").employee_id == worker.employee_id
    with pytest.raises(AuthenticationError):
        auth.resolve_identity("ghost")
    with pytest.raises(AuthenticationError):
        auth.resolve_identity("")


def test_require_role(worker, admin):
    assert AuthService.require_role(admin, Role.ADMIN) is admin
    with pytest.raises(AuthorizationError, match="Admin privileges"):
        AuthService.require_role(worker, Role.ADMIN)
    with pytest.raises(AuthorizationError, match="Employee access only"):
        AuthService.require_role(admin, Role.EMPLOYEE)


def test_hashed_verifier_rejects_plaintext_leftovers():
    verifier = HashedVerifier()

    assert verifier.verify(verifier.encode("s3cret"), "s3cret")
    assert not verifier.verify("s3cret", "s3cret")


def test_build_verifier():
    assert isinstance(build_verifier("PLAIN"), PlaintextVerifier)
    assert isinstance(build_verifier("hash"), HashedVerifier)
    with pytest.raises(ValidationError):
        build_verifier("rot13")
