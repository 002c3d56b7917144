import os
import tomllib
from pathlib import Path

import libraclient.constants as C

pkg_root = Path(__file__).parent
config_file = pkg_root / "config.toml"

cfg = tomllib.loads(Path(config_file).read_text())

rpc = cfg.setdefault("rpc", {})
rpc["url"] = os.getenv("LIBRA_RPC_URL", rpc.get("url", "https://testnet.libra.org/v1"))
rpc["chain_id"] = int(os.getenv("LIBRA_CHAIN_ID", rpc.get("chain_id", 2)))
rpc["timeout"] = float(rpc.get("timeout", C.RPC_TIMEOUT))

wait = cfg.setdefault("wait", {})
wait["step"] = float(os.getenv("LIBRA_WAIT_STEP", wait.get("step", C.WAIT_STEP)))
wait["timeout"] = float(wait.get("timeout", C.WAIT_TIMEOUT))

faucet = cfg.setdefault("faucet", {})
faucet["url"] = os.getenv("LIBRA_FAUCET_URL", faucet.get("url", "http://faucet.testnet.libra.org"))
