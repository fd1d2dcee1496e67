from flopay_sdk.pay.mmo import TransferRequest, decode_response
