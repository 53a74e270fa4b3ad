import logging
import uuid
from queue import Queue, Empty

import paho.mqtt.client as mqtt

from sweepradar.errors import TransportError

logger = logging.getLogger(__name__)


class MqttSource:
    """
    Byte source fed by an MQTT topic, for sensors bridged over the network.

    Each message payload is a raw slice of the sweep stream
    (e.g. ``b"12:34|90:5|"``); payloads are queued untouched, so records may
    still be split across messages and the parser reassembles them.

    paho delivers messages on its own network thread; that thread only ever
    touches the queue.  `read()` runs on the GUI loop and returns the next
    payload, or ``b""`` when none arrives within `timeout` seconds.
    """

    def __init__(self, host, port, topic, timeout=0.05):
        self.host, self.port, self.topic = host, port, topic
        self.timeout = timeout

        random_id = f"sweepradar-{uuid.uuid4().hex[:8]}"
        self.cli = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, client_id=random_id)
        self.cli.on_connect = self._on_connect
        self.cli.on_message = self._on_msg

        self.q: "Queue[bytes]" = Queue()

    def connect(self):
        try:
            self.cli.connect(self.host, self.port, 60)
        except OSError as exc:
            raise TransportError(
                f"Error connecting to broker {self.host}:{self.port}: {exc}") from exc
        self.cli.loop_start()
        logger.info("Connected to %s:%s, topic %s", self.host, self.port, self.topic)
        return self

    def read(self) -> bytes:
        try:
            return self.q.get(timeout=self.timeout)
        except Empty:
            return b""

    def close(self):
        self.cli.disconnect()
        self.cli.loop_stop()

    def _on_connect(self, client, *_):
        client.subscribe(self.topic)

    def _on_msg(self, _cli, _userdata, msg):
        if msg.payload:
            self.q.put_nowait(bytes(msg.payload))
