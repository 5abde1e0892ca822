"""
End-to-end tests for the build pipeline
"""

import json

import pytest

from blogindex.errors import ArticlesRootNotFoundError
from blogindex.pipeline import PipelineOrchestrator


def _run(config, articles_root, tmp_path, fmt="json"):
    out = tmp_path / "out" / "article-data.json"
    orchestrator = PipelineOrchestrator(config, articles_root=articles_root, output_path=out, output_format=fmt)
    orchestrator.run()
    return out, orchestrator


class TestEndToEnd:
    """Scenarios covering both authoring formats and the failure policy"""

    def test_front_matter_article(self, config, articles_root, write_article, tmp_path, front_matter_article):
        write_article("0001.2025-start.md", front_matter_article)

        out, _ = _run(config, articles_root, tmp_path)
        record = json.loads(out.read_text(encoding="utf-8"))[0]

        assert record["title"] == "开篇"
        assert record["date"] == "2025-11-25"
        assert record["wordCount"] == 8
        assert record["preview"].startswith("道生一")
        assert record["filePath"] == "0001.2025-start.md"
        assert record["slug"] == "0001.2025-start"

    def test_inline_tag_article(self, config, articles_root, write_article, tmp_path):
        write_article("poem.md", '<meta title="诗" date="2025-12-05" tags="随笔，古诗" desc="千里江陵一日还" />\n朝辞白帝彩云间')
        write_article("poem2.md", '<meta title="诗二" date="2025-12-04" tags="随笔，古诗" />\n两岸猿声啼不住')

        out, _ = _run(config, articles_root, tmp_path)
        first, second = json.loads(out.read_text(encoding="utf-8"))

        assert first["tags"] == ["随笔", "古诗"]
        assert first["preview"] == "千里江陵一日还"
        assert second["preview"] == "两岸猿声啼不住"

    def test_same_date_ordered_by_filename(self, config, articles_root, write_article, tmp_path):
        for name in ["c.md", "a.md", "b.md"]:
            write_article(name, f"---\ntitle: {name}\ndate: 2025-12-01\n---\nbody")

        out, _ = _run(config, articles_root, tmp_path)
        data = json.loads(out.read_text(encoding="utf-8"))

        assert [r["filePath"] for r in data] == ["a.md", "b.md", "c.md"]

    def test_missing_title_excluded(self, config, articles_root, write_article, tmp_path, front_matter_article):
        write_article("good.md", front_matter_article)
        write_article("untitled-a.md", "---\ndate: 2025-12-01\n---\nbody")
        write_article("untitled-b.md", '<meta date="2025-12-01" />\nbody')

        out, orchestrator = _run(config, articles_root, tmp_path)
        data = json.loads(out.read_text(encoding="utf-8"))

        assert [r["title"] for r in data] == ["开篇"]
        assert orchestrator.stats.scanned == 3
        assert orchestrator.stats.skipped == 2

    def test_empty_root_yields_empty_index(self, config, articles_root, tmp_path):
        out, _ = _run(config, articles_root, tmp_path, fmt="js")
        assert out.read_text(encoding="utf-8") == "const allArticles = [];\n\nexport default allArticles;\n"

    def test_missing_root_is_fatal(self, config, tmp_path):
        out = tmp_path / "out.js"
        orchestrator = PipelineOrchestrator(config, articles_root=tmp_path / "missing", output_path=out)

        with pytest.raises(ArticlesRootNotFoundError):
            orchestrator.run()
        assert not out.exists()

    def test_rebuild_is_byte_identical(self, config, articles_root, write_article, tmp_path, front_matter_article, inline_tag_article):
        write_article("a/one.md", front_matter_article)
        write_article("b/two.md", inline_tag_article)
        write_article("b/three.md", "---\ntitle: 三\ndate: 2025-11-25\n---\n" + "三生万物。" * 20)

        out, _ = _run(config, articles_root, tmp_path, fmt="js")
        first = out.read_bytes()
        out, _ = _run(config, articles_root, tmp_path, fmt="js")

        assert out.read_bytes() == first

    def test_defaults_from_config(self, tmp_path, write_article, front_matter_article):
        """Articles root and output default to paths beside the config file"""
        from blogindex.config import Config

        write_article("a.md", front_matter_article)
        orchestrator = PipelineOrchestrator(Config(tmp_path / "blogindex.yaml"))
        orchestrator.run()

        assert (tmp_path / "public" / "js" / "api" / "article-data.js").exists()

    def test_skip_hidden_from_config(self, tmp_path, write_article, front_matter_article):
        from blogindex.config import Config

        write_article(".drafts/wip.md", front_matter_article)
        write_article("post.md", front_matter_article)
        out = tmp_path / "index.json"

        default = PipelineOrchestrator(Config(tmp_path / "blogindex.yaml"), output_path=out, output_format="json")
        default.run()
        assert [r["filePath"] for r in json.loads(out.read_text(encoding="utf-8"))] == [".drafts/wip.md", "post.md"]

        (tmp_path / "blogindex.yaml").write_text("skip_hidden: true\n", encoding="utf-8")
        skipping = PipelineOrchestrator(Config(tmp_path / "blogindex.yaml"), output_path=out, output_format="json")
        skipping.run()
        assert [r["filePath"] for r in json.loads(out.read_text(encoding="utf-8"))] == ["post.md"]


class _RecordingProgress:
    """Stand-in for rich Progress that records task descriptions"""

    def __init__(self):
        self.descriptions = []
        self.open_tasks = set()

    def add_task(self, description, total=None):
        self.descriptions.append(description)
        task_id = len(self.descriptions)
        self.open_tasks.add(task_id)
        return task_id

    def advance(self, task_id, advance=1):
        pass

    def remove_task(self, task_id):
        self.open_tasks.discard(task_id)


class TestStageProgress:
    """Each stage shows its own progress task"""

    def test_one_task_per_stage(self, config, articles_root, write_article, tmp_path, front_matter_article):
        write_article("a.md", front_matter_article)
        orchestrator = PipelineOrchestrator(config, articles_root=articles_root, output_path=tmp_path / "out.js")
        progress = _RecordingProgress()

        orchestrator.write(orchestrator.collect(progress), progress)

        assert progress.descriptions == [stage.description for stage in orchestrator.stages]
        assert progress.open_tasks == set()
        assert all(stage.success for stage in orchestrator.stages)
