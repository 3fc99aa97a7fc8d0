# SPDX-License-Identifier: Apache-2.0
from data_designer.plugins.plugin import Plugin, PluginType

analysis_plugin = Plugin(
    config_qualified_name="data_designer_humanizer.config.HumanizerAnalysisColumnConfig",
    impl_qualified_name="data_designer_humanizer.generator.HumanizerAnalysisColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)

rewrite_plugin = Plugin(
    config_qualified_name="data_designer_humanizer.config.HumanizerRewriteColumnConfig",
    impl_qualified_name="data_designer_humanizer.generator.HumanizerRewriteColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
