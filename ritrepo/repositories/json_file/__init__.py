from .repos_json import ReposListerJson, ReposWriterJson, json_list_writer, repos_file_path

__all__ = ["ReposListerJson", "ReposWriterJson", "json_list_writer", "repos_file_path"]
