"""
DOMAIN LAYER - Users, chat rooms and messages

Contents:
- entities/       User, ChatRoom and TextMessage aggregates
- value_objects/  validated immutable wrappers (ids, names, content, flags)
- collections/    TypedCollection used inside aggregates
- events/         facts drained from aggregates (UserSawChatRoomEvent)
- ports/          abstract repositories and the event publisher
- exceptions/     named failures raised by the layers above

Only the standard library is imported here: no pydantic, no dotenv, no I/O.
"""
