from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from structclone import UnsupportedTypeError, clone, clone_procedure


class Status(Enum):
    PENDING = "pending"
    DONE = "done"


@dataclass
class Agent:
    name: str
    inbox: list[str] = field(default_factory=list)
    peers: list["Agent"] = field(default_factory=list)
    last_seen: datetime | None = None


class Socket:
    """A live resource: clone the agents around it, never the socket itself."""

    def __init__(self, address: str):
        self.address = address
        self.stream = iter(())


@clone_procedure(Socket)
def share_socket(sock: Socket) -> Socket:
    return sock


def main() -> None:
    alice = Agent("alice", ["hello"], last_seen=datetime(2025, 1, 1, 12, 0))
    bob = Agent("bob")
    alice.peers.append(bob)
    bob.peers.append(alice)

    world = {"agents": [alice, bob], "status": Status.PENDING, "socket": Socket("tcp://x")}
    snapshot = clone(world)

    c_alice, c_bob = snapshot["agents"]
    print(f"alice cloned: {c_alice is not alice}")
    print(f"cycle preserved: {c_bob.peers[0] is c_alice}")
    print(f"socket shared: {snapshot['socket'] is world['socket']}")

    c_alice.inbox.append("mutated in snapshot")
    print(f"original inbox untouched: {alice.inbox}")

    try:
        clone({"callback": main})
    except UnsupportedTypeError as e:
        print(f"refused: {e}")


if __name__ == "__main__":
    main()
