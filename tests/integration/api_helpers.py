"""
Request helpers shared by the HTTP-level tests.
"""
from tests.fakes import STRONG_PASSWORD


def signup_payload(email: str, first_name: str = "Jane", last_name: str = "Smith") -> dict:
    return {
        "email": email,
        "password": STRONG_PASSWORD,
        "firstName": first_name,
        "lastName": last_name,
    }


def sign_in(client, principal: str, email: str) -> str:
    """Sign up (ignoring an existing account) and return a session token"""
    client.post(f"/{principal}/signup", json=signup_payload(email))
    response = client.post(f"/{principal}/signin", json={"email": email, "password": STRONG_PASSWORD})
    assert response.status_code == 200, response.text
    return response.json()["token"]
