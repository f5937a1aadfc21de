import os
import logging
import configparser

app_config = configparser.ConfigParser(allow_no_value=True)

DEFAULT_CFG = {
    "parser": {
        "chunk_size": 4096,  # Bytes fed to lxml per read
        "resolve_entities": False,  # Never expand external entities by default
        "huge_tree": False,  # Disable libxml2 security limits
    },
    "serializer": {
        "pretty_print": False,
        "xml_declaration": True,
        "encoding": "UTF-8",
    },
}


def _check_bool(cfg, sect, opt):
    try:
        cfg.getboolean(sect, opt)
    except ValueError as exc:
        raise ValueError(f"Invalid {opt}: {cfg.get(sect, opt)}") from exc


def load_config(path=None, explicit=False):
    """
    Loads a config file from the specified path into the global config. If no
    path is specified, the file is inferred by checking local and global paths.

    @param path     The path of the configuration file to load
    @param explicit Don't return a default
    """
    lgr = logging.getLogger("load_config")

    if path is None:
        if os.path.exists("pidf.conf"):
            path = os.path.abspath("pidf.conf")
            lgr.info("Assuming %s", path)
        elif os.path.exists("/etc/pidfparser/pidf.conf"):
            path = "/etc/pidfparser/pidf.conf"
            lgr.info("Assuming %s", path)
        elif explicit:
            raise FileNotFoundError("Unable to find default config file")

    ret_config = configparser.ConfigParser(allow_no_value=True)
    ret_config.read_dict(DEFAULT_CFG)

    if path and os.path.exists(path):
        lgr.info("Loading config file from %s", path)
        with open(path, "r", encoding="utf8") as cfg_fp:
            ret_config.read_file(cfg_fp, source=path)
    elif explicit:
        raise FileNotFoundError("Config file required, but not present")
    else:
        lgr.info("Using default config")

    chunk_size = ret_config.get("parser", "chunk_size")
    if chunk_size in [None, ""]:
        chunk_size = DEFAULT_CFG["parser"]["chunk_size"]
    else:
        try:
            chunk_size = int(chunk_size)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid chunk_size: {chunk_size}") from exc

        if chunk_size <= 0:
            raise ValueError(f"Invalid chunk_size: {chunk_size}")
    ret_config.set("parser", "chunk_size", str(chunk_size))

    for (sect, opt) in [
        ("parser", "resolve_entities"),
        ("parser", "huge_tree"),
        ("serializer", "pretty_print"),
        ("serializer", "xml_declaration"),
    ]:
        _check_bool(ret_config, sect, opt)

    encoding = ret_config.get("serializer", "encoding")
    if not encoding:
        ret_config.set("serializer", "encoding", DEFAULT_CFG["serializer"]["encoding"])

    if explicit:
        ret_config.set("parser", "cfg_path", path)

    app_config.clear()
    app_config.update(ret_config)


# The library is usable without an explicit load_config() call
app_config.read_dict(DEFAULT_CFG)
