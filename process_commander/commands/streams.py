"""Diffusion des flux de sortie d'un processus vers plusieurs
destinations.

BroadcastWriter transmet chaque écriture à toutes ses destinations.
StreamPump lit un pipe du processus enfant dans un thread dédié et
alimente un BroadcastWriter jusqu'à la fin du flux.
"""

import codecs
import io
import threading
from typing import IO, Any, List, Optional, Sequence

CHUNK_SIZE = 64 * 1024


class TextStreamWriter:
    """Adapte un flux texte sans buffer binaire à des écritures d'octets.

    Les octets sont décodés en UTF-8 de manière incrémentale : un
    caractère coupé entre deux blocs est conservé jusqu'au bloc
    suivant. Les séquences invalides sont remplacées.

    Attributes:
        stream: Flux texte de destination (io.StringIO, sortie de
            notebook, etc.).
    """

    def __init__(self, stream: Any) -> None:
        self.stream = stream
        self._decoder = codecs.getincrementaldecoder("utf-8")(
            errors="replace"
        )

    def write(self, data: bytes) -> int:
        """Décode data et l'écrit sur le flux texte.

        Returns:
            Nombre d'octets consommés.
        """
        text = self._decoder.decode(data)
        if text:
            self.stream.write(text)
        return len(data)

    def flush(self) -> None:
        """Écrit les octets en attente puis vide le flux texte."""
        text = self._decoder.decode(b"", final=True)
        if text:
            self.stream.write(text)
        self.stream.flush()


def inherited_stream(stream: Any) -> Any:
    """Retourne la vue binaire d'un flux standard hérité.

    sys.stdout et sys.stderr sont des flux texte : leur attribut
    buffer accepte des octets. Un flux texte sans buffer (redirection
    vers io.StringIO, notebook) est enveloppé dans un
    TextStreamWriter. Tout autre flux est utilisé tel quel.

    Args:
        stream: Flux standard du processus courant.
    """
    buffer = getattr(stream, "buffer", None)
    if buffer is not None:
        return buffer
    if isinstance(stream, io.TextIOBase):
        return TextStreamWriter(stream)
    return stream


class BroadcastWriter:
    """Destination d'écriture qui diffuse vers plusieurs destinations.

    Chaque appel à write() est transmis, dans l'ordre, à toutes les
    destinations. La première destination qui lève une exception
    interrompt l'écriture et l'exception est propagée : toutes les
    destinations doivent réussir.

    Attributes:
        sinks: Destinations binaires, dans l'ordre de diffusion.
    """

    def __init__(self, sinks: Sequence[Any]) -> None:
        """Initialise le diffuseur.

        Args:
            sinks: Objets exposant write(bytes) et, optionnellement,
                flush().
        """
        self.sinks: List[Any] = list(sinks)

    def write(self, data: bytes) -> int:
        """Écrit data sur toutes les destinations.

        Returns:
            Nombre d'octets écrits.
        """
        for sink in self.sinks:
            sink.write(data)
        return len(data)

    def flush(self) -> None:
        """Vide les tampons de toutes les destinations qui en ont."""
        for sink in self.sinks:
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()


class StreamPump:
    """Recopie un pipe vers un BroadcastWriter dans un thread.

    Si la diffusion échoue, l'erreur est conservée dans error et le
    pipe continue d'être lu jusqu'à la fin afin que le processus
    enfant ne reste pas bloqué sur un pipe plein.

    Attributes:
        name: Nom du flux ("stdout" ou "stderr").
        error: Première exception levée par la diffusion, ou None.
    """

    def __init__(
        self, name: str, pipe: IO[bytes], writer: BroadcastWriter
    ) -> None:
        """Initialise la pompe.

        Args:
            name: Nom du flux, utilisé pour le thread et les erreurs.
            pipe: Pipe binaire en lecture du processus enfant.
            writer: Diffuseur alimenté par la pompe.
        """
        self.name = name
        self.error: Optional[BaseException] = None
        self._pipe = pipe
        self._writer = writer
        self._thread = threading.Thread(
            target=self._run, name=f"commander-{name}", daemon=True
        )

    def start(self) -> "StreamPump":
        """Démarre le thread de lecture."""
        self._thread.start()
        return self

    def join(self) -> None:
        """Attend la fin du flux puis vide les tampons."""
        self._thread.join()

    def _run(self) -> None:
        try:
            while True:
                chunk = self._pipe.read1(CHUNK_SIZE)
                if not chunk:
                    break
                if self.error is not None:
                    continue
                try:
                    self._writer.write(chunk)
                except Exception as e:
                    self.error = e
        finally:
            self._pipe.close()
            try:
                self._writer.flush()
            except Exception as e:
                if self.error is None:
                    self.error = e
