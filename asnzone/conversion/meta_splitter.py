import logging
import os
from typing import Iterable

from asnzone.network_objects import AddressFamily


class MetaSplitter:
    tmp_suffix = ".tmp"
    file_mode = 0o644

    def __init__(self, ipv4_path: str, ipv6_path: str):
        """ Object splitting meta file into the two rbldnsd data files

        :param ipv4_path: path of deployed IPv4 data file
        :param ipv6_path: path of deployed IPv6 data file
        """
        self.lgr = logging.getLogger(self.__class__.__name__)
        self.paths = {AddressFamily.IPV4: ipv4_path,
                      AddressFamily.IPV6: ipv6_path}

    def separate(self, meta_lines: Iterable[str]) -> dict[AddressFamily, list[str]]:
        """ Sort meta file lines by their family tag

        :param meta_lines: lines of meta file
        :raises ValueError: when a line has no known tag or there are no
                            lines at all
        :return: untagged lines for every family
        """
        separated = {AddressFamily.IPV4: [], AddressFamily.IPV6: []}
        seen_any = False
        for line_number, line in enumerate(meta_lines, start=1):
            seen_any = True
            tag, sep, payload = line.rstrip("\n").partition("\t")
            family = AddressFamily.from_str(tag) if sep else None
            if family is None:
                raise ValueError(f"Line {line_number} of meta file has "
                                 f"no family tag")
            separated[family].append(payload)
        if not seen_any:
            raise ValueError("Meta file is empty")
        return separated

    def _write(self, tmp_path: str, lines: list[str]):
        with open(tmp_path, "w", encoding="utf-8") as tmp_file:
            for line in lines:
                tmp_file.write(f"{line}\n")
        os.chmod(tmp_path, self.file_mode)

    def _remove(self, tmp_paths: Iterable[str]):
        for tmp_path in tmp_paths:
            try:
                os.unlink(tmp_path)
            except FileNotFoundError:
                pass

    def split(self, meta_lines: Iterable[str]) -> bool:
        """ Replace both data files with content of the meta file

        Deployed files are replaced only after both new files were
        completely written.

        :param meta_lines: lines of meta file
        :return: True on success, otherwise False
        """
        try:
            separated = self.separate(meta_lines)
        except ValueError as e:
            self.lgr.error("Refusing to split meta file, %s", e)
            return False

        written = {}
        try:
            for family, lines in separated.items():
                tmp_path = self.paths[family] + self.tmp_suffix
                written[family] = tmp_path
                self._write(tmp_path, lines)
        except OSError as e:
            self.lgr.error("Creating %s data file failed, %s",
                           family.display_name, e)
            self._remove(written.values())
            return False

        for family, tmp_path in written.items():
            try:
                os.replace(tmp_path, self.paths[family])
            except OSError as e:
                self.lgr.error("Creating %s failed, %s",
                               os.path.basename(self.paths[family]), e)
                self._remove(written.values())
                return False
            self.lgr.info("Wrote %s lines to %s",
                          len(separated[family]), self.paths[family])
        return True
