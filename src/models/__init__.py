from src.models.enums import (
    FriendshipStatus,
    GroupPrivacy,
    InteractionType,
    MemberRole,
    MembershipStatus,
)
from src.models.recipe import (
    CategoryIn,
    CategoryOut,
    CommentIn,
    CommentOut,
    CommentUpdate,
    EventIn,
    EventOut,
    PostIn,
    PostOut,
    SavedNote,
    SavedRecipeIn,
    SavedRecipeOut,
)
from src.models.social import (
    FriendOut,
    FriendRequestIn,
    GroupIn,
    GroupOut,
    GroupUpdate,
    InteractionContent,
    InteractionOut,
    MemberIn,
    MemberOut,
    MemberRoleIn,
    MemberStatusIn,
)
from src.models.users import (
    AvailabilityResponse,
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserOut,
    UserUpdate,
)

__all__ = [
    "AvailabilityResponse",
    "CategoryIn",
    "CategoryOut",
    "CommentIn",
    "CommentOut",
    "CommentUpdate",
    "EventIn",
    "EventOut",
    "FriendOut",
    "FriendRequestIn",
    "FriendshipStatus",
    "GroupIn",
    "GroupOut",
    "GroupPrivacy",
    "GroupUpdate",
    "InteractionContent",
    "InteractionOut",
    "InteractionType",
    "LoginRequest",
    "LoginResponse",
    "MemberIn",
    "MemberOut",
    "MemberRole",
    "MemberRoleIn",
    "MemberStatusIn",
    "MembershipStatus",
    "PostIn",
    "PostOut",
    "SavedNote",
    "SavedRecipeIn",
    "SavedRecipeOut",
    "UserCreate",
    "UserOut",
    "UserUpdate",
]
