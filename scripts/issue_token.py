"""Mint a bearer token for local development, signed with JWT_SECRET_KEY."""
import argparse
from datetime import timedelta

from leadhub.features.auth.utils.security import create_access_token


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("sub", help="user id (token subject)")
    parser.add_argument("--email")
    parser.add_argument("--first-name")
    parser.add_argument("--last-name")
    parser.add_argument("--profile-image-url")
    parser.add_argument("--days", type=int, default=1, help="lifetime in days")
    args = parser.parse_args()

    claims = {"sub": args.sub}
    for claim in ("email", "first_name", "last_name", "profile_image_url"):
        value = getattr(args, claim)
        if value is not None:
            claims[claim] = value

    print(create_access_token(claims, expires_delta=timedelta(days=args.days)))


if __name__ == "__main__":
    main()
