from .token_verifier import ALGORITHM, JwtTokenVerifier

__all__ = ["ALGORITHM", "JwtTokenVerifier"]
