# txparser

A library for watching Ethereum addresses and recording the transactions that
touch them, with HTTP handlers that serve the results as a WSGI application.

A poller asks an Ethereum node for the latest block over JSON-RPC
(`eth_getBlockByNumber`, full transaction objects) and stores every
transaction whose sender or recipient has been subscribed. Subscribed
addresses and their transactions are kept in memory.

The package uses only the standard library.

## Installation

```
pip install .
```

## Modules

* `txparser.evm`: `Address`, a `str` subclass whose `validate()` returns the
  address or raises `InvalidAddressError` unless it is `0x` followed by
  exactly 40 hexadecimal digits.
* `txparser.models`: the frozen `Transaction` dataclass (`hash`, `from_`,
  `to`, `value`, `block_number`) and the abstract `Parser` interface
  (`get_current_block`, `subscribe`, `get_transactions`).
* `txparser.ethereum`: the abstract `Repository`, `EthereumParser`, and
  `hex_to_decimal`, which turns a `0x`-prefixed hex string into a signed
  64-bit integer and raises `ValueError` otherwise.
* `txparser.repository`: `MemoryStorage`, a thread-safe in-memory
  `Repository`. The last parsed block starts at `"0x0"` and becomes the block
  number of the most recently saved transaction. A transaction whose hash is
  already stored under an address is ignored.
* `txparser.client`: `EthereumClient(url, logger)`, whose `get_block(block_id)`
  returns a list of `TransactionResponse`. An error object in the node's reply
  is raised as `RpcError`.
* `txparser.poller`: `Poller(eth_client, repo, logger)`, whose `poll()` runs
  one pass over the latest block, and `Runner(logger, poll_rate)`, whose
  `run(poller, stop_event)` polls every `poll_rate` seconds, logging failures,
  until the `threading.Event` is set.
* `txparser.service`: `ParserService`, a `Parser` that forwards every call to
  the parser registered for chain id 1 (`ETHEREUM_CHAIN_ID`). It raises
  `LoadingParserError` if none is registered.
* `txparser.router`: `Router`, a WSGI application that matches on exact path
  and then method, with the `Request` and `Response` types its handlers use.
* `txparser.handlers`: `ParserHandlers` and `register_routes`, which add the
  HTTP endpoints below to a `Router`.
* `txparser.env`: `get_env_fallback(key, fallback)`, returning the variable's
  value when it is set, even if empty, and the fallback otherwise.
* `txparser.errors`: `ConflictError`, `NotFoundError` and `BadRequestError`,
  the categories that decide the HTTP status of a failure.

## HTTP endpoints

`register_routes(router, parser_svc, logger)` registers:

| Method | Path              | Query     | Response                                         |
|--------|-------------------|-----------|--------------------------------------------------|
| GET    | `/blocks/current` |           | `{"block_number": <int>}`, the last parsed block |
| POST   | `/subscribe`      | `address` | `{}` once the address is being watched           |
| GET    | `/transactions`   | `address` | list of `{hash, from, to, value, blockNumber}`   |

Responses carry `Content-Type: application/json`. Failures are answered with
the error message as the body and these status codes:

* `400` for an invalid address
* `404` for an unknown path, or for transactions of an address that is not subscribed
* `405` for a known path called with another method
* `409` for subscribing an address twice
* `500` for anything else

## Wiring it together

```python
import logging
import threading
from wsgiref.simple_server import make_server

from txparser.client import EthereumClient
from txparser.env import get_env_fallback
from txparser.ethereum import EthereumParser
from txparser.handlers import register_routes
from txparser.poller import Poller, Runner
from txparser.repository import MemoryStorage
from txparser.router import Router
from txparser.service import ETHEREUM_CHAIN_ID, ParserService

logger = logging.getLogger("txparser")

repo = MemoryStorage()
client = EthereumClient(get_env_fallback("ETHEREUM_NODE_RPC_URL", "http://localhost:8545"), logger)

service = ParserService(logger)
service.register(ETHEREUM_CHAIN_ID, EthereumParser(repo, logger))

stop = threading.Event()
runner = Runner(logger, 5.0)
threading.Thread(target=runner.run, args=(Poller(client, repo, logger), stop), daemon=True).start()

router = Router()
register_routes(router, service, logger)
make_server("", 3000, router).serve_forever()
```

Then, for example:

```
curl -X POST 'http://localhost:3000/subscribe?address=0x0000000000000000000000000000000000000000'
curl 'http://localhost:3000/transactions?address=0x0000000000000000000000000000000000000000'
curl 'http://localhost:3000/blocks/current'
```

## What it does not do

The package installs no command and has no ready-made entry point that starts
the poller and an HTTP server together; the wiring above has to be written by
the application. It does not serve HTTP itself: `Router` is a WSGI application
and needs a WSGI server to run under. Storage is in memory only, so
subscriptions and transactions are lost when the process ends.