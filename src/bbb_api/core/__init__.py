"""Core of the client: signing, URL assembly, decoding and the facade.

The core depends only on the transport abstraction; concrete HTTP code lives
in `bbb_api.adapters`.
"""
