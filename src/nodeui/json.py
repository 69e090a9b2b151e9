""" JSON encoding for everything that crosses the control channel. The
    encoder always returns bytes; the decoder accepts str or bytes.
"""

import msgspec

encoder = msgspec.json.Encoder()
decoder = msgspec.json.Decoder()

dumps = encoder.encode
loads = decoder.decode
DecodeError = msgspec.DecodeError


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
