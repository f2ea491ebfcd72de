from userbase.domain.user.aggregates.user import User, generate_user_id

__all__ = ["User", "generate_user_id"]
