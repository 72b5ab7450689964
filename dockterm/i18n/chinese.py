"""Simplified Chinese interface strings."""

from __future__ import annotations

from dockterm.i18n.english import TranslationSet


def chinese_set() -> TranslationSet:
    """Return the Chinese translation set; entries left empty fall back to English."""
    return TranslationSet(
        pruning_status="修剪中",
        removing_status="移除中",
        restarting_status="重启中",
        starting_status="启动中",
        stopping_status="停止中",
        upping_service_status="升级服务中",
        upping_project_status="升级项目中",
        downing_status="下架中",
        pausing_status="暂停中",
        running_custom_command_status="正在运行自定义命令",
        running_bulk_command_status="正在运行批量命令",
        no_view_maching_new_line_focused_switch_statement=(
            "没有匹配 newLineFocused switch 语句的视图"
        ),
        error_occurred=(
            "发生错误！请在 https://github.com/jesseduffield/lazydocker/issues 上创建一个问题"
        ),
        connection_failed="无法连接到 Docker 客户端。您可能需要重新启动 Docker 客户端",
        unattachable_container_error=(
            "容器不支持 attaching。您必须使用“-it”标志运行服务，"
            "或者在docker-compose.yml文件中使用`stdin_open: true，tty: true`"
        ),
        waiting_for_container_info=(
            "在 Docker 给我们更多关于容器的信息之前，无法继续。请几分钟后重试。"
        ),
        cannot_attach_stopped_container_error=(
            "您不能 attach 到已停止的容器，您需要先启动它（您可以用 'r' 键来执行此操作）"
            "（是的，我懒得为您自动执行此操作）（很酷的是，我可以通过错误消息与您进行一对一的通讯）"
        ),
        cannot_access_docker_socket_error=(
            "无法访问 Docker 套接字：unix:///var/run/docker.sock\n"
            "请以 root 用户身份运行 lazydocker 或阅读"
            "https://docs.docker.com/install/linux/linux-postinstall/"
        ),
        cannot_kill_child_error=(
            "等待三秒钟以停止子进程。可能有一个孤儿进程在您的系统上继续运行。"
        ),
        donate="捐赠",
        confirm="确认",
        return_="返回",
        focus_main="聚焦主面板",
        lc_filter="过滤列表",
        navigate="导航",
        execute="执行",
        close="关闭",
        quit="退出",
        menu="菜单",
        menu_title="菜单",
        scroll="滚动",
        open_config="打开lazydocker配置",
        edit_config="编辑lazydocker配置",
        cancel="取消",
        remove="移除",
        hide_stopped="隐藏/显示已停止的容器",
        force_remove="强制移除",
        remove_with_volumes="移除并删除卷",
        remove_service="移除容器",
        up_service="启动服务",
        stop="停止",
        pause="暂停",
        restart="重新启动",
        down="关闭项目",
        down_with_volumes="关闭包括卷的项目",
        start="启动项目",
        rebuild="重建",
        recreate="重新创建",
        previous_context="上一个选项卡",
        next_context="下一个选项卡",
        view_logs="查看日志",
        up_project="创建并启动容器",
        down_project="停止并移除容器",
        remove_image="移除镜像",
        remove_volume="移除卷",
        remove_network="移除网络",
        remove_without_prune="移除但不删除未标记的父级",
        remove_without_prune_with_force="移除(强制)但不删除未标记的父级",
        remove_with_force="移除(强制)",
        prune_containers="删除退出的容器",
        prune_volumes="删除未使用的卷",
        prune_networks="删除未使用的网络",
        prune_images="删除未使用的镜像",
        stop_all_containers="停止所有容器",
        remove_all_containers="删除所有容器(强制)",
        view_restart_options="查看重启选项",
        exec_shell="执行shell",
        run_custom_command="运行预定义的自定义命令",
        view_bulk_commands="查看批量命令",
        filter_list="过滤列表",
        open_in_browser="在浏览器中打开(第一个端口为http)",
        sort_containers_by_state="按状态排序容器",
        global_title="全局",
        main_title="主要",
        project_title="项目",
        services_title="服务",
        containers_title="容器",
        standalone_containers_title="独立容器",
        images_title="镜像",
        volumes_title="卷",
        networks_title="网络",
        custom_command_title="自定义命令：",
        bulk_command_title="批量命令：",
        error_title="错误",
        logs_title="日志",
        config_title="配置",
        env_title="环境变量",
        docker_compose_config_title="Docker-Compose配置",
        top_title="系统资源管理",
        stats_title="统计信息",
        credits_title="关于我们",
        container_config_title="容器配置",
        container_env_title="容器环境变量",
        nothing_to_display="无内容显示",
        no_container_for_service="没有日志可以展示；该服务未关联任何容器",
        cannot_display_env_variables="展示环境变量时出现问题",
        no_containers="没有容器",
        no_container="没有容器",
        no_images="没有镜像",
        no_volumes="没有卷",
        no_networks="没有网络",
        no_services="没有服务",
        confirm_quit="您确定要退出吗？",
        confirm_up_project="您确定要“up”的docker compose项目吗？",
        must_force_to_remove_container="您无法删除正在运行的容器，除非您强制执行。您想强制执行吗？",
        not_enough_space="空间不足，无法渲染面板",
        confirm_prune_images="您确定要删除所有未使用的镜像吗？",
        confirm_prune_containers="您确定要删除所有停止的容器吗？",
        confirm_stop_containers="您确定要停止所有容器吗？",
        confirm_remove_containers="您确定要删除所有容器吗？",
        confirm_prune_volumes="您确定要删除所有未使用的卷吗？",
        confirm_prune_networks="您确定要删除所有未使用的网络吗？",
        stop_service="您确定要停止此服务的容器吗？",
        stop_container="您确定要停止此容器吗？",
        press_enter_to_return=(
            "按 enter 返回 lazydocker（您可以在配置文件中设置 "
            "`gui.returnImmediately: true` 来禁用此提示）"
        ),
        no="否",
        yes="是",
        lc_next_screen_mode="下一个屏幕模式（正常/半屏/全屏）",
        lc_prev_screen_mode="上一个屏幕模式",
        filter_prompt="筛选",
    )